"""Static meal catalogs and swap suggestions."""

from fitind.domain.nutrition import Meal, MealType

VEGETARIAN_MEALS: tuple[Meal, ...] = (
    Meal(
        name="Breakfast - Poha with Peanuts",
        localized_name="Subah ka Poha (1.5 Katori)",
        portion="1.5 bowls",
        calories=250,
        protein=6,
        carbs=40,
        fats=8,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Mid-Morning - Banana & Almonds",
        localized_name="Kela aur Badaam (1 Kela + 10 Badaam)",
        portion="1 banana + 10 almonds",
        calories=180,
        protein=4,
        carbs=30,
        fats=6,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Lunch - Roti, Dal, Rice & Sabzi",
        localized_name="Daal-Chawal aur 2 Roti (Ghar ka Khana)",
        portion="2 rotis + 1 bowl dal + 1 bowl rice + sabzi",
        calories=550,
        protein=18,
        carbs=85,
        fats=12,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Evening Snack - Sprouts Chaat",
        localized_name="Moong Sprouts Chat (1 Katori)",
        portion="1 bowl",
        calories=150,
        protein=8,
        carbs=22,
        fats=3,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Dinner - Paneer Sabzi & Roti",
        localized_name="Paneer ki Sabzi aur 2 Roti",
        portion="2 rotis + paneer curry",
        calories=450,
        protein=20,
        carbs=50,
        fats=15,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Post-Dinner - Turmeric Milk",
        localized_name="Haldi Doodh (1 Glass)",
        portion="1 glass",
        calories=120,
        protein=8,
        carbs=12,
        fats=4,
        meal_type=MealType.VEG,
    ),
)

NON_VEGETARIAN_MEALS: tuple[Meal, ...] = (
    Meal(
        name="Breakfast - Egg Bhurji & Roti",
        localized_name="Anda Bhurji aur 2 Roti",
        portion="2 eggs + 2 rotis",
        calories=320,
        protein=18,
        carbs=35,
        fats=12,
        meal_type=MealType.NONVEG,
    ),
    Meal(
        name="Mid-Morning - Banana & Boiled Egg",
        localized_name="Kela aur Uble Ande",
        portion="1 banana + 2 eggs",
        calories=220,
        protein=14,
        carbs=28,
        fats=8,
        meal_type=MealType.NONVEG,
    ),
    Meal(
        name="Lunch - Chicken Curry, Rice & Roti",
        localized_name="Chicken Curry, Chawal aur Roti",
        portion="150g chicken + 1 bowl rice + 2 rotis",
        calories=650,
        protein=45,
        carbs=75,
        fats=18,
        meal_type=MealType.NONVEG,
    ),
    Meal(
        name="Evening Snack - Boiled Eggs",
        localized_name="Uble Ande (2 Ande)",
        portion="2 boiled eggs",
        calories=140,
        protein=12,
        carbs=2,
        fats=10,
        meal_type=MealType.NONVEG,
    ),
    Meal(
        name="Dinner - Fish Curry & Roti",
        localized_name="Machhli ki Curry aur 2 Roti",
        portion="150g fish + 2 rotis",
        calories=420,
        protein=35,
        carbs=45,
        fats=12,
        meal_type=MealType.NONVEG,
    ),
    Meal(
        name="Post-Dinner - Protein Milk",
        localized_name="Doodh (1 Glass)",
        portion="1 glass",
        calories=120,
        protein=8,
        carbs=12,
        fats=4,
        meal_type=MealType.NONVEG,
    ),
)

# Veg on religious days (Tue/Sat by default), non-veg otherwise.
FLEXITARIAN_MEALS: tuple[Meal, ...] = (
    Meal(
        name="Breakfast - Egg Bhurji OR Poha (based on day)",
        localized_name="Subah ka Nashta",
        portion="Veg on Tue/Sat, Non-veg other days",
        calories=280,
        protein=12,
        carbs=38,
        fats=10,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Mid-Morning - Fruits & Nuts",
        localized_name="Kela aur Badaam",
        portion="1 banana + 10 almonds",
        calories=180,
        protein=4,
        carbs=30,
        fats=6,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Lunch - Dal/Chicken with Rice & Roti",
        localized_name="Daal-Chawal (Tue/Sat) ya Chicken (other days)",
        portion="Changes based on religious days",
        calories=600,
        protein=28,
        carbs=80,
        fats=15,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Evening Snack - Sprouts OR Boiled Eggs",
        localized_name="Moong Sprouts ya Uble Ande",
        portion="Veg on Tue/Sat",
        calories=150,
        protein=10,
        carbs=18,
        fats=5,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Dinner - Paneer/Fish with Roti",
        localized_name="Paneer (Tue/Sat) ya Machhli (other days)",
        portion="2 rotis + curry",
        calories=480,
        protein=26,
        carbs=48,
        fats=14,
        meal_type=MealType.VEG,
    ),
    Meal(
        name="Post-Dinner - Milk",
        localized_name="Haldi Doodh",
        portion="1 glass",
        calories=120,
        protein=8,
        carbs=12,
        fats=4,
        meal_type=MealType.VEG,
    ),
)

MEAL_ALTERNATIVES: dict[str, tuple[str, ...]] = {
    "Breakfast": (
        "Oats with milk & berries",
        "Dosa with sambar",
        "Idli with coconut chutney",
        "Besan chilla with curd",
    ),
    "Lunch": (
        "Brown rice with rajma",
        "Quinoa pulao with raita",
        "Mixed dal with 2 rotis",
        "Chole with bhature (sunday treat)",
    ),
    "Dinner": (
        "Grilled fish with veggies",
        "Tofu stir-fry with rotis",
        "Egg curry with rice",
        "Palak paneer with 2 rotis",
    ),
    "Snack": (
        "Roasted makhana",
        "Fruit chaat",
        "Greek yogurt with nuts",
        "Protein shake",
    ),
}

FALLBACK_ALTERNATIVES: tuple[str, ...] = (
    "Adjust portions to fit your macros",
    "Consult nutritionist for specific swaps",
)
