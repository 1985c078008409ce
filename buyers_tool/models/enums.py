"""
Closed value sets used across inputs, results and the rule registry.
"""
from enum import Enum, IntEnum


# === Input vocabularies ===

class ApplianceType(str, Enum):
    REFRIGERATOR = "refrigerator"
    WASHER = "washer"
    DRYER = "dryer"
    RANGE = "range"
    DISHWASHER = "dishwasher"
    MICROWAVE = "microwave"


class DamageLocation(str, Enum):
    FRONT_DOOR = "front_door"
    FRONT_PANEL = "front_panel"
    CONTROL_PANEL = "control_panel"
    HANDLE = "handle"
    LEFT_SIDE = "left_side"
    RIGHT_SIDE = "right_side"
    BACK = "back"
    TOP = "top"
    BOTTOM = "bottom"


class DamageSeverity(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    SEVERE = "severe"


class DamageType(str, Enum):
    SCRATCH = "scratch"
    DENT = "dent"
    SCUFF = "scuff"
    DISCOLORATION = "discoloration"


class RetailerType(str, Enum):
    BIG_BOX = "big_box"
    INDEPENDENT = "independent"
    OUTLET = "outlet"
    ONLINE = "online"
    LIQUIDATION = "liquidation"


class InstallationType(str, Enum):
    BUILT_IN = "built_in"
    FREESTANDING = "freestanding"
    STACKED = "stacked"


class VisibleSide(str, Enum):
    FRONT = "front"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"


class BuyerPurpose(str, Enum):
    PRIMARY_HOME = "primary_home"
    RENTAL_PROPERTY = "rental_property"
    FLIP = "flip"
    TEMPORARY = "temporary"


class RiskTolerance(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class PriceFlexibility(str, Enum):
    FIRM = "firm"
    NEGOTIABLE = "negotiable"


# === Rules and trace ===

class RuleSeverity(str, Enum):
    """Blockers halt the pipeline, warnings accumulate, info never fails."""
    BLOCKER = "blocker"
    WARNING = "warning"
    INFO = "info"


class ModuleName(str, Enum):
    DAMAGE_CLASSIFIER = "DamageClassifier"
    PRICING_ENGINE = "PricingEngine"
    SAFETY_GATE = "SafetyGate"
    WARRANTY_EVALUATOR = "WarrantyEvaluator"
    RETURN_POLICY_FILTER = "ReturnPolicyFilter"
    NEGOTIATION_ENGINE = "NegotiationEngine"
    LOGISTICS_SOLVER = "LogisticsSolver"
    VERDICT_COMPILER = "VerdictCompiler"


# === Module conclusions ===

class DamageTier(IntEnum):
    """How visible the damage will be once the unit is installed."""
    HIDDEN = 1
    PARTIALLY_VISIBLE = 2
    PROMINENTLY_VISIBLE = 3


class TierLabel(str, Enum):
    HIDDEN = "Hidden"
    PARTIALLY_VISIBLE = "Partially Visible"
    PROMINENTLY_VISIBLE = "Prominently Visible"


class VisibilityImpact(str, Enum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"


class DiscountRating(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class WarrantyScore(str, Enum):
    EXCELLENT = "excellent"
    ACCEPTABLE = "acceptable"
    LIMITED = "limited"
    UNACCEPTABLE = "unacceptable"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReturnPolicyRating(str, Enum):
    EXCELLENT = "excellent"
    ACCEPTABLE = "acceptable"
    RISKY = "risky"
    RED_FLAG = "red_flag"


class NegotiationProbability(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNLIKELY = "unlikely"


class DeliveryRecommendation(str, Enum):
    PROFESSIONAL = "professional"
    SELF_TRANSPORT = "self_transport"
    EITHER = "either"


class Recommendation(str, Enum):
    PROCEED = "PROCEED"
    PROCEED_WITH_CAUTION = "PROCEED_WITH_CAUTION"
    SKIP = "SKIP"
    WALK_AWAY = "WALK_AWAY"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
