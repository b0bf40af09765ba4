"""
FitFlow - Built-in Exercise and Meal Catalogs.

Static, curated data. Nothing here is mutated at runtime; the engine
receives these tuples through `Catalog.default()`.
"""

from typing import Tuple

from app.models.catalog import Exercise, Meal, MuscleGroup


def _ex(name: str, group: MuscleGroup, *equipment: str) -> Exercise:
    return Exercise(name=name, group=group, equipment=frozenset(equipment))


PUSH = MuscleGroup.PUSH
PULL = MuscleGroup.PULL
LEGS = MuscleGroup.LEGS
CORE = MuscleGroup.CORE
CONDITIONING = MuscleGroup.CONDITIONING


EXERCISES: Tuple[Exercise, ...] = (
    _ex("Push-Up", PUSH, "bodyweight"),
    _ex("Bench Press", PUSH, "barbell", "dumbbells"),
    _ex("Dumbbell Shoulder Press", PUSH, "dumbbells"),
    _ex("Tricep Dip", PUSH, "bodyweight"),
    _ex("Pull-Up", PULL, "bodyweight"),
    _ex("Bent-Over Row", PULL, "barbell", "dumbbells"),
    _ex("Lat Pulldown", PULL, "machines"),
    _ex("Bicep Curl", PULL, "dumbbells", "barbell"),
    _ex("Squat", LEGS, "barbell", "dumbbells", "bodyweight"),
    _ex("Romanian Deadlift", LEGS, "barbell", "dumbbells"),
    _ex("Lunge", LEGS, "bodyweight", "dumbbells"),
    _ex("Leg Press", LEGS, "machines"),
    _ex("Plank", CORE, "bodyweight"),
    _ex("Hanging Leg Raise", CORE, "bodyweight"),
    _ex("Mountain Climbers", CONDITIONING, "bodyweight"),
    _ex("Rowing (machine)", CONDITIONING, "machines"),
    _ex("Incline Push-Up", PUSH, "bodyweight"),
    _ex("Chest Press (machine)", PUSH, "machines"),
    _ex("Cable Fly", PUSH, "machines"),
    _ex("Seated Dumbbell Press", PUSH, "dumbbells"),
    _ex("Chest-Supported Row", PULL, "machines", "dumbbells"),
    _ex("Seated Row", PULL, "machines"),
    _ex("Assisted Pull-Up", PULL, "machines", "bands"),
    _ex("TRX Row", PULL, "bands", "bodyweight"),
    _ex("Face Pull", PULL, "cables", "bands", "machines"),
    _ex("Glute Bridge", LEGS, "bodyweight", "dumbbells"),
    _ex("Hip Thrust", LEGS, "dumbbells", "barbell", "machines"),
    _ex("Step-Up", LEGS, "bodyweight", "dumbbells"),
    _ex("Bulgarian Split Squat", LEGS, "bodyweight", "dumbbells"),
    _ex("Single-Leg Romanian Deadlift", LEGS, "dumbbells"),
    _ex("Calf Raise", LEGS, "bodyweight", "machines"),
    _ex("Leg Extension", LEGS, "machines"),
    _ex("Hamstring Curl", LEGS, "machines"),
    _ex("Farmer's Carry", CONDITIONING, "dumbbells", "kettlebell"),
    _ex("Kettlebell Swing", CONDITIONING, "kettlebell"),
    _ex("Band Pull-Apart", PULL, "bands"),
    _ex("TRX Chest Press", PUSH, "bands", "bodyweight"),
    _ex("Pallof Press", CORE, "bands", "machines"),
    _ex("Side Plank", CORE, "bodyweight"),
    _ex("Walking Lunge", LEGS, "bodyweight", "dumbbells"),
)


def _meal(name, tags, calories, protein, carbs, fat, ingredients, recipe) -> Meal:
    return Meal(
        name=name,
        tags=frozenset(tags),
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        ingredients=tuple(ingredients),
        recipe=tuple(recipe),
    )


MEALS: Tuple[Meal, ...] = (
    _meal("Oatmeal with Berries", ["omnivore", "vegetarian", "vegan"], 350, 12, 55, 8,
          ["oats", "berries", "almond milk"],
          ["Combine 1/2 cup rolled oats with 1 cup almond milk in a small pot.",
           "Bring to a simmer over medium heat, stirring occasionally, until thickened (about 5 minutes).",
           "Stir in a handful of fresh or frozen berries and a pinch of salt."]),
    _meal("Greek Yogurt Bowl", ["omnivore", "vegetarian"], 320, 20, 35, 10,
          ["greek yogurt", "honey", "nuts"],
          ["Spoon 1 cup plain Greek yogurt into a bowl.",
           "Top with sliced fruit, a tablespoon of honey and a small handful of chopped nuts."]),
    _meal("Grilled Chicken & Veggies", ["omnivore", "pescatarian"], 520, 42, 45, 14,
          ["chicken", "broccoli", "sweet potato"],
          ["Season a chicken breast with salt, pepper and a little olive oil.",
           "Grill or pan-sear over medium-high heat 6-8 minutes per side until cooked through.",
           "Steam broccoli and roast cubed sweet potato tossed with a little oil."]),
    _meal("Quinoa Salad", ["omnivore", "vegetarian", "vegan"], 410, 14, 58, 12,
          ["quinoa", "beans", "vegetables"],
          ["Cook quinoa and let cool.",
           "Toss with beans, chopped vegetables and a simple lemon-olive oil dressing."]),
    _meal("Tofu Stir-Fry", ["vegetarian", "vegan"], 450, 22, 38, 18,
          ["tofu", "mixed veg", "soy sauce"],
          ["Press and cube tofu and pan-fry until golden.",
           "Stir-fry mixed vegetables and toss with tofu and soy sauce."]),
    _meal("Salmon & Rice", ["omnivore", "pescatarian"], 560, 38, 48, 22,
          ["salmon", "rice", "asparagus"],
          ["Season salmon and bake or pan-sear until flaky.",
           "Serve with cooked rice and steamed asparagus."]),
    _meal("Lentil Soup", ["vegetarian", "vegan"], 300, 18, 40, 6,
          ["lentils", "carrot", "onion"],
          ["Saute onion, carrot and celery; add lentils and stock; simmer until tender."]),
    _meal("Avocado Toast", ["omnivore", "vegetarian", "vegan"], 320, 8, 30, 18,
          ["bread", "avocado", "egg optional"],
          ["Toast whole-grain bread and top with mashed avocado, lemon and salt."]),
    _meal("Protein Smoothie", ["omnivore", "vegetarian", "vegan"], 380, 28, 40, 6,
          ["banana", "protein powder", "milk"],
          ["Blend banana, protein powder, milk and ice until smooth."]),
    _meal("Turkey Wrap", ["omnivore"], 420, 32, 38, 12,
          ["turkey", "wrap", "lettuce"],
          ["Layer sliced turkey, lettuce and tomato on a whole-grain wrap; roll and slice."]),
    _meal("Chickpea Curry", ["vegetarian", "vegan"], 460, 16, 56, 16,
          ["chickpeas", "tomato", "spices"],
          ["Saute onion and spices, add chickpeas and tomatoes, simmer 10-15 minutes."]),
    _meal("Tuna Salad", ["omnivore", "pescatarian"], 340, 30, 10, 18,
          ["tuna", "leafy greens", "olive oil"],
          ["Mix tuna with olive oil and lemon; serve over mixed greens."]),
    _meal("Egg Scramble with Veg", ["omnivore", "vegetarian"], 300, 22, 6, 20,
          ["eggs", "spinach", "tomato"],
          ["Whisk eggs and scramble with chopped spinach and tomato until set."]),
    _meal("Beef Stir-Fry", ["omnivore"], 480, 36, 30, 20,
          ["beef", "broccoli", "soy sauce"],
          ["Slice beef thin, sear in a hot pan, add vegetables and sauce; cook until done."]),
    _meal("Shrimp Tacos", ["omnivore", "pescatarian"], 420, 28, 40, 12,
          ["shrimp", "tortilla", "cabbage"],
          ["Season and sear shrimp; assemble in tortillas with slaw and salsa."]),
    _meal("Pasta with Tomato & Turkey", ["omnivore"], 560, 36, 60, 18,
          ["pasta", "tomato sauce", "turkey mince"],
          ["Cook pasta; brown turkey mince with sauce; combine and serve."]),
    _meal("Black Bean Burrito Bowl", ["omnivore", "vegetarian", "vegan"], 500, 20, 70, 12,
          ["black beans", "rice", "corn"],
          ["Layer rice, beans, corn and salsa in a bowl; top with avocado if desired."]),
    _meal("Veggie Omelette", ["vegetarian"], 330, 20, 8, 22,
          ["eggs", "bell pepper", "mushroom"],
          ["Whisk eggs and pour over sauteed vegetables; fold when set."]),
    _meal("Cottage Cheese & Fruit", ["omnivore", "vegetarian"], 220, 18, 18, 6,
          ["cottage cheese", "fruit"],
          ["Spoon cottage cheese into a bowl and top with sliced fruit and a drizzle of honey."]),
    _meal("Pancakes (Protein)", ["omnivore", "vegetarian"], 420, 24, 50, 10,
          ["oats", "egg", "protein powder"],
          ["Blend oats, egg and protein powder; cook small pancakes on a non-stick pan."]),
    _meal("Baked Sweet Potato & Tuna", ["omnivore", "pescatarian"], 380, 28, 46, 6,
          ["sweet potato", "tuna", "yogurt"],
          ["Bake sweet potato until tender; top with flaked tuna mixed with yogurt and herbs."]),
    _meal("Mushroom Risotto (veg)", ["vegetarian"], 480, 12, 70, 14,
          ["rice", "mushroom", "parmesan"],
          ["Saute mushrooms; gradually add stock to rice while stirring until creamy; finish with parmesan."]),
    _meal("Soba Noodle Salad", ["vegetarian", "vegan"], 360, 12, 60, 8,
          ["soba", "veg", "sesame"],
          ["Cook soba, rinse cold; toss with chopped vegetables and a sesame-soy dressing."]),
    _meal("Paneer Curry", ["vegetarian"], 520, 28, 30, 28,
          ["paneer", "tomato", "spices"],
          ["Saute onions and spices; add tomato and paneer; simmer briefly."]),
    _meal("Pork Tenderloin & Quinoa", ["omnivore"], 540, 42, 46, 16,
          ["pork", "quinoa", "greens"],
          ["Roast pork tenderloin and serve sliced over cooked quinoa and greens."]),
    _meal("Eggplant Parmesan", ["vegetarian"], 460, 22, 40, 20,
          ["eggplant", "tomato", "mozzarella"],
          ["Bread and bake eggplant slices; layer with sauce and cheese and bake until bubbly."]),
    _meal("Beef Chili", ["omnivore"], 520, 36, 40, 22,
          ["beef", "beans", "tomato"],
          ["Brown beef, add beans, tomatoes and spices; simmer 30 minutes."]),
    _meal("Greek Salad with Feta", ["vegetarian"], 300, 10, 14, 22,
          ["tomato", "cucumber", "feta"],
          ["Chop vegetables and toss with feta, olives and olive oil."]),
    _meal("Chia Pudding", ["vegetarian", "vegan"], 260, 8, 28, 12,
          ["chia seeds", "milk", "fruit"],
          ["Mix chia seeds with milk and refrigerate overnight; top with fruit."]),
    _meal("Stuffed Peppers", ["omnivore", "vegetarian"], 420, 18, 48, 14,
          ["pepper", "rice", "cheese"],
          ["Fill halved peppers with cooked rice and veggies (or mince); bake until tender."]),
    _meal("Miso Soup with Tofu", ["vegetarian", "vegan"], 140, 10, 8, 6,
          ["miso", "tofu", "seaweed"],
          ["Add miso paste to hot water, add tofu cubes and wakame, warm gently."]),
    _meal("Grain Bowl with Tempeh", ["vegetarian", "vegan"], 520, 26, 60, 16,
          ["tempeh", "brown rice", "veg"],
          ["Pan-fry tempeh, assemble over grains with roasted vegetables and dressing."]),
    _meal("Smoked Salmon Bagel", ["omnivore", "pescatarian"], 480, 28, 46, 18,
          ["bagel", "smoked salmon", "cream cheese"],
          ["Toast bagel, spread cream cheese and top with smoked salmon and capers."]),
    _meal("Vegetable Frittata", ["vegetarian"], 340, 20, 10, 22,
          ["eggs", "zucchini", "onion"],
          ["Saute vegetables, pour whisked eggs and bake until set."]),
    _meal("Baked Cod & Veggies", ["omnivore", "pescatarian"], 360, 34, 20, 12,
          ["cod", "vegetables", "lemon"],
          ["Season cod and bake with mixed vegetables until cooked through."]),
    _meal("Mediterranean Tuna Pasta", ["omnivore", "pescatarian"], 520, 34, 62, 12,
          ["pasta", "tuna", "tomato"],
          ["Cook pasta, toss with tuna, tomatoes, olives and olive oil."]),
)
