from typing import Tuple

# Curated ingredient vocabularies. Keys are language codes (ISO 639-1) ->
# canonical terms as they should be displayed and stored.
DEFAULT_LOCALE = "fr"

KNOWN_INGREDIENTS = {
    "fr": (
        # viandes
        "boeuf", "bœuf", "poulet", "porc", "veau", "agneau", "dinde",
        "canard", "jambon", "bacon", "saucisse", "chorizo", "prosciutto",
        "pepperoni", "salami", "lard", "lardon", "merguez", "andouille",
        "boudin", "côtelette", "escalope", "filet", "steak", "rôti",
        "gigot", "cuisse", "aile", "poitrine", "épaule", "jarret",
        # poissons et fruits de mer
        "saumon", "thon", "morue", "cabillaud", "sole", "truite", "bar",
        "crevette", "homard", "crabe", "moule", "huître", "palourde",
        "calmar", "poulpe", "anchois", "sardine", "maquereau", "dorade",
        "tilapia", "flétan", "espadon", "lotte", "merlu",
        # produits laitiers
        "lait", "crème", "beurre", "fromage", "yaourt", "yogourt",
        "mozzarella", "parmesan", "cheddar", "gruyère", "emmental",
        "feta", "ricotta", "mascarpone", "gorgonzola", "brie", "camembert",
        "chèvre", "roquefort", "comté", "raclette", "reblochon",
        # oeufs
        "oeuf", "œuf", "oeufs", "œufs",
        # légumes
        "tomate", "oignon", "ail", "carotte", "pomme de terre", "patate",
        "poivron", "courgette", "aubergine", "concombre", "laitue",
        "salade", "épinard", "brocoli", "chou-fleur", "chou", "céleri",
        "poireau", "asperge", "haricot", "petit pois", "pois", "maïs",
        "champignon", "avocat", "betterave", "navet", "radis", "fenouil",
        "artichaut", "endive", "roquette", "cresson", "mâche", "échalote",
        # fruits
        "pomme", "poire", "orange", "citron", "lime", "pamplemousse",
        "banane", "fraise", "framboise", "bleuet", "myrtille", "mûre",
        "cerise", "pêche", "abricot", "prune", "raisin", "melon",
        "pastèque", "ananas", "mangue", "papaye", "kiwi", "grenade",
        "figue", "datte", "noix de coco", "litchi",
        # herbes et épices
        "persil", "coriandre", "basilic", "menthe", "thym", "romarin",
        "origan", "estragon", "ciboulette", "aneth", "laurier", "sauge",
        "sel", "poivre", "paprika", "cumin", "curry", "curcuma",
        "cannelle", "muscade", "gingembre", "piment", "cayenne",
        "cardamome", "clou de girofle", "anis", "safran", "vanille",
        # céréales et féculents
        "riz", "pâtes", "spaghetti", "penne", "fusilli", "tagliatelle",
        "nouille", "couscous", "quinoa", "boulgour", "orge", "avoine",
        "pain", "farine", "semoule", "polenta", "tortilla", "pita",
        # légumineuses
        "lentille", "pois chiche", "haricot rouge", "haricot noir",
        "haricot blanc", "fève", "soja", "tofu", "tempeh", "edamame",
        # noix et graines
        "amande", "noix", "noisette", "cajou", "pistache", "arachide",
        "cacahuète", "pécan", "pignon", "sésame", "tournesol", "lin",
        "chia", "courge",
        # condiments et sauces
        "moutarde", "ketchup", "mayonnaise", "vinaigre", "sauce soja",
        "worcestershire", "tabasco", "sriracha", "harissa", "pesto",
        "tapenade", "aïoli", "rémoulade", "tzatziki",
        # huiles
        "huile olive", "huile végétale", "huile tournesol", "huile sésame",
        "huile canola", "huile arachide", "huile noix",
        # sucres
        "sucre", "miel", "sirop érable", "sirop", "cassonade", "mélasse",
        "stevia", "agave",
        # autres
        "bouillon", "fond", "gélatine", "levure", "bicarbonate",
        "poudre à pâte", "cacao", "chocolat", "café", "thé",
        "vin", "bière", "rhum", "cognac", "marsala", "porto",
    ),
    "en": (
        # meats
        "beef", "chicken", "pork", "veal", "lamb", "turkey", "duck",
        "ham", "bacon", "sausage", "chorizo", "prosciutto", "pepperoni",
        "salami", "lard", "andouille", "blood sausage",
        "chop", "cutlet", "fillet", "filet", "steak", "roast", "leg",
        "thigh", "wing", "breast", "shoulder", "shank",
        # fish and seafood
        "salmon", "tuna", "cod", "sole", "trout", "bass", "sea bass",
        "shrimp", "prawn", "lobster", "crab", "mussel", "oyster", "clam",
        "squid", "calamari", "octopus", "anchovy", "sardine", "mackerel",
        "bream", "tilapia", "halibut", "swordfish", "monkfish", "hake",
        # dairy
        "milk", "cream", "butter", "cheese", "yogurt", "yoghurt",
        "mozzarella", "parmesan", "cheddar", "gruyere", "emmental",
        "feta", "ricotta", "mascarpone", "gorgonzola", "brie", "camembert",
        "goat cheese", "roquefort", "comte", "raclette", "reblochon",
        # eggs
        "egg", "eggs",
        # vegetables
        "tomato", "onion", "garlic", "carrot", "potato", "potatoes",
        "bell pepper", "pepper", "zucchini", "eggplant", "aubergine",
        "cucumber", "lettuce", "salad", "spinach", "broccoli",
        "cauliflower", "cabbage", "celery", "leek", "asparagus",
        "green bean", "pea", "peas", "corn", "mushroom", "avocado",
        "beet", "beetroot", "turnip", "radish", "fennel", "artichoke",
        "endive", "arugula", "rocket", "watercress", "shallot",
        # fruits
        "apple", "pear", "orange", "lemon", "lime", "grapefruit",
        "banana", "strawberry", "raspberry", "blueberry", "blackberry",
        "cherry", "peach", "apricot", "plum", "grape", "melon",
        "watermelon", "pineapple", "mango", "papaya", "kiwi", "pomegranate",
        "fig", "date", "coconut", "lychee",
        # herbs and spices
        "parsley", "cilantro", "coriander", "basil", "mint", "thyme",
        "rosemary", "oregano", "tarragon", "chives", "dill", "bay leaf",
        "sage", "salt", "paprika", "cumin", "curry", "turmeric",
        "cinnamon", "nutmeg", "ginger", "chili", "cayenne",
        "cardamom", "clove", "anise", "saffron", "vanilla",
        # grains and starches
        "rice", "pasta", "spaghetti", "penne", "fusilli", "tagliatelle",
        "noodle", "noodles", "couscous", "quinoa", "bulgur", "barley",
        "oat", "oats", "bread", "flour", "semolina", "polenta", "tortilla",
        "pita",
        # legumes
        "lentil", "lentils", "chickpea", "chickpeas", "red bean",
        "black bean", "white bean", "fava bean", "soy", "soybean", "tofu",
        "tempeh", "edamame",
        # nuts and seeds
        "almond", "walnut", "hazelnut", "cashew", "pistachio", "peanut",
        "pecan", "pine nut", "sesame", "sunflower", "flax", "flaxseed",
        "chia", "pumpkin seed",
        # condiments and sauces
        "mustard", "ketchup", "mayonnaise", "mayo", "vinegar", "soy sauce",
        "worcestershire", "tabasco", "sriracha", "harissa", "pesto",
        "tapenade", "aioli", "remoulade", "tzatziki",
        # oils
        "olive oil", "vegetable oil", "sunflower oil", "sesame oil",
        "canola oil", "peanut oil", "walnut oil",
        # sugars and sweeteners
        "sugar", "honey", "maple syrup", "syrup", "brown sugar", "molasses",
        "stevia", "agave",
        # others
        "broth", "stock", "gelatin", "yeast", "baking soda",
        "baking powder", "cocoa", "chocolate", "coffee", "tea",
        "wine", "beer", "rum", "cognac", "marsala", "port",
    ),
}

SUPPORTED_LOCALES = tuple(KNOWN_INGREDIENTS)

# Unit tokens recognized at the head of an ingredient line, both locales.
UNITS = (
    # volume
    "ml", "cl", "dl", "l", "litre", "litres", "liter", "liters",
    "c. à soupe", "c.à soupe", "cuillère à soupe", "cuillères à soupe",
    "c. soupe", "c. à s.",
    "c. à thé", "c.à thé", "cuillère à thé", "cuillères à thé", "c. thé",
    "c. à café", "c.à café", "cuillère à café", "cuillères à café",
    "c. à c.",
    "tbsp", "tablespoon", "tablespoons", "tsp", "teaspoon", "teaspoons",
    "tasse", "tasses", "cup", "cups",
    "verre", "verres", "glass", "glasses",
    # poids
    "g", "kg", "gramme", "grammes", "gram", "grams",
    "kilogramme", "kilogrammes", "kilogram", "kilograms",
    "oz", "ounce", "ounces", "once", "onces",
    "lb", "lbs", "pound", "pounds", "livre", "livres",
    # autres
    "pincée", "pincées", "pinch", "pinches", "goutte", "gouttes",
    "drop", "drops", "tranche", "tranches", "slice", "slices",
    "morceau", "morceaux", "piece", "pieces", "feuille", "feuilles",
    "leaf", "leaves", "brin", "brins", "sprig", "sprigs",
    "gousse", "gousses", "clove", "cloves", "tige", "tiges",
    "stalk", "stalks", "boîte", "boîtes", "can", "cans", "pot", "pots",
    "jar", "jars", "sachet", "sachets", "packet", "packets",
    "paquet", "paquets", "package", "packages",
    "bouteille", "bouteilles", "bottle", "bottles",
)

# Leading "of"-equivalents stripped from the ingredient name. Longer forms
# come first so "de la " wins over "de ".
PARTITIVES = (
    "de la ", "de l'", "de l’", "de ", "d'", "d’", "du ", "des ", "of ",
)


def normalize_locale(lang: str) -> str:
    if not lang:
        return DEFAULT_LOCALE
    lang = lang.strip().lower().replace("_", "-").split("-")[0]
    if lang in KNOWN_INGREDIENTS:
        return lang
    return DEFAULT_LOCALE


def get_vocabulary(lang: str) -> Tuple[str, ...]:
    """Return the canonical ingredient terms for a locale.

    Regional tags ("en-CA") resolve to their language and unknown locales
    fall back to ``DEFAULT_LOCALE``.
    """
    return KNOWN_INGREDIENTS[normalize_locale(lang)]
