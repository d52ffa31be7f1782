from typing import Any, Dict, List

# --- Severity vocabulary ---
SEVERITY_SEVERE = "severe"

# severity_levels tag that escalates an ingredient to a hard block
MEDICAL_TAG = "medical"

# --- Reason phrases ---
# Consumers match on these fragments, keep them stable.
AVOID_MATCH_PHRASE = "explicit avoid-food match"
MEDICAL_RESTRICTION_PHRASE = "medical restriction"
TRIGGER_PHRASE = "which can trigger"
DEFAULT_MEDICAL_CONDITION = "User-specified medical restriction"

# --- Verdict suggestions ---
SUGGESTIONS_BLOCKED: List[str] = [
    "This recipe contains ingredients that are unsafe for your medical conditions",
    "Try using our \"Make One for Me\" feature to generate a safe alternative",
]
SUGGESTIONS_WARNED: List[str] = [
    "This recipe may need some ingredient substitutions",
    "Check the ingredient list carefully before cooking",
]
SUGGESTIONS_SAFE: List[str] = [
    "This recipe appears safe for your dietary needs",
]

# --- Allergen category synonyms ---
# Maps an allergen category (key) to the ingredient names it covers (value)
INGREDIENT_SYNONYMS: Dict[str, List[str]] = {
    "dairy": ["milk", "cheese", "butter", "cream", "yogurt", "whey", "casein"],
    "nuts": ["nut", "almond", "peanut", "cashew", "walnut", "pecan", "hazelnut", "pistachio"],
    "gluten": ["wheat", "barley", "rye", "malt", "flour", "bread", "pasta"],
    "eggs": ["egg", "albumin", "mayonnaise"],
    "soy": ["soy", "tofu", "tempeh", "edamame", "miso"],
    "shellfish": ["shrimp", "crab", "lobster", "clam", "mussel", "oyster"],
    "fish": ["fish", "salmon", "tuna", "cod", "tilapia", "anchovy"],
}

# --- Substitutions ---
# Ordered: the first category found in an ingredient wins.
SAFE_ALTERNATIVES: Dict[str, List[str]] = {
    "dairy": ["plant-based milk", "coconut milk", "almond milk"],
    "gluten": ["gluten-free flour", "almond flour", "rice flour"],
    "nuts": ["seeds", "nut-free alternatives"],
    "eggs": ["flax egg", "chia egg", "applesauce"],
    "soy": ["coconut aminos", "chickpeas"],
}

# --- Medical condition trigger catalogue ---
# Each condition splits its triggers into tiers; every entry carries its own
# substitutes. Tier order is common, moderate, severe.
TIER_COMMON = "common"
TIER_MODERATE = "moderate"
TIER_SEVERE = "severe"

# Tier -> severity given to catalogue triggers added to a profile
TIER_SEVERITY: Dict[str, str] = {
    TIER_COMMON: "mild",
    TIER_MODERATE: "moderate",
    TIER_SEVERE: "severe",
}

TRIGGER_FOOD_DB: Dict[str, Dict[str, List[Dict[str, Any]]]] = {
    "UC": {
        TIER_COMMON: [
            {"name": "spicy foods", "category": "seasonings",
             "description": "Hot peppers, chili powder, cayenne",
             "alternatives": ["mild herbs", "turmeric", "ginger"]},
            {"name": "high-fiber vegetables", "category": "vegetables",
             "description": "Raw broccoli, cauliflower, cabbage",
             "alternatives": ["cooked vegetables", "peeled vegetables", "vegetable juices"]},
        ],
        TIER_MODERATE: [
            {"name": "nuts", "category": "proteins",
             "description": "Whole nuts, especially with skins",
             "alternatives": ["nut butters", "ground nuts", "seeds"]},
            {"name": "seeds", "category": "proteins",
             "description": "Whole seeds, especially small ones",
             "alternatives": ["ground seeds", "seed butters"]},
        ],
        TIER_SEVERE: [
            {"name": "alcohol", "category": "beverages",
             "description": "All alcoholic beverages",
             "alternatives": ["herbal teas", "sparkling water", "fruit juices"]},
            {"name": "caffeine", "category": "beverages",
             "description": "Coffee, tea, energy drinks",
             "alternatives": ["decaf coffee", "herbal teas", "caffeine-free sodas"]},
        ],
    },
    "Crohns": {
        TIER_COMMON: [
            {"name": "high-fiber foods", "category": "grains",
             "description": "Whole grains, bran, raw fruits with skin",
             "alternatives": ["refined grains", "white rice", "peeled fruits"]},
            {"name": "fatty foods", "category": "fats",
             "description": "Fried foods, high-fat meats, butter",
             "alternatives": ["lean proteins", "olive oil in moderation", "steamed foods"]},
        ],
        TIER_MODERATE: [
            {"name": "dairy", "category": "dairy",
             "description": "Milk, cheese, ice cream",
             "alternatives": ["lactose-free dairy", "plant-based milk", "dairy-free alternatives"]},
        ],
        TIER_SEVERE: [
            {"name": "alcohol", "category": "beverages",
             "description": "All alcoholic beverages",
             "alternatives": ["herbal teas", "sparkling water", "fruit juices"]},
        ],
    },
    "IBS": {
        TIER_COMMON: [
            {"name": "high-FODMAP foods", "category": "various",
             "description": "Onions, garlic, beans, certain fruits",
             "alternatives": ["low-FODMAP alternatives", "garlic oil", "green parts of scallions"]},
            {"name": "dairy", "category": "dairy",
             "description": "Milk, soft cheeses, ice cream",
             "alternatives": ["lactose-free dairy", "hard cheeses", "plant-based alternatives"]},
        ],
        TIER_MODERATE: [
            {"name": "gluten", "category": "grains",
             "description": "Wheat, barley, rye products",
             "alternatives": ["gluten-free grains", "rice", "quinoa"]},
            {"name": "artificial sweeteners", "category": "sweeteners",
             "description": "Sorbitol, mannitol, xylitol",
             "alternatives": ["natural sugars", "stevia", "maple syrup"]},
        ],
        TIER_SEVERE: [
            {"name": "caffeine", "category": "beverages",
             "description": "Coffee, tea, energy drinks",
             "alternatives": ["herbal teas", "decaf coffee", "caffeine-free beverages"]},
        ],
    },
    "GERD": {
        TIER_COMMON: [
            {"name": "citrus", "category": "fruits",
             "description": "Oranges, lemons, grapefruits, tomatoes",
             "alternatives": ["non-citrus fruits", "melons", "bananas"]},
            {"name": "spicy foods", "category": "seasonings",
             "description": "Hot peppers, chili, spicy sauces",
             "alternatives": ["mild herbs", "ginger", "turmeric"]},
        ],
        TIER_MODERATE: [
            {"name": "chocolate", "category": "sweets",
             "description": "Dark chocolate, milk chocolate, cocoa",
             "alternatives": ["carob", "vanilla", "fruit-based desserts"]},
        ],
        TIER_SEVERE: [
            {"name": "caffeine", "category": "beverages",
             "description": "Coffee, tea, energy drinks",
             "alternatives": ["herbal teas", "decaf coffee", "caffeine-free beverages"]},
            {"name": "alcohol", "category": "beverages",
             "description": "All alcoholic beverages",
             "alternatives": ["sparkling water", "herbal teas", "fruit juices"]},
        ],
    },
    "Celiac": {
        TIER_COMMON: [
            {"name": "wheat", "category": "grains",
             "description": "All wheat products, flour, bread",
             "alternatives": ["rice flour", "almond flour", "gluten-free bread"]},
            {"name": "barley", "category": "grains",
             "description": "Barley grain, malt, beer",
             "alternatives": ["rice", "quinoa", "gluten-free beer"]},
        ],
        TIER_MODERATE: [
            {"name": "rye", "category": "grains",
             "description": "Rye bread, rye flour",
             "alternatives": ["gluten-free bread", "rice crackers"]},
        ],
        TIER_SEVERE: [
            {"name": "malt", "category": "additives",
             "description": "Malt extract, malt flavoring, malted milk",
             "alternatives": ["rice syrup", "honey", "pure vanilla extract"]},
            {"name": "brewer's yeast", "category": "additives",
             "description": "Used in beer and some supplements",
             "alternatives": ["nutritional yeast (gluten-free)", "other B-vitamin sources"]},
        ],
    },
}

CUSTOM_CONDITION = "Custom"
