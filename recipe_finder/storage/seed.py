from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .store import MemStore

DEMO_USER: dict[str, str] = {"username": "demo", "password": "password"}

_UNSPLASH = "https://images.unsplash.com/{photo}?auto=format&fit=crop&w=800&h=500"

SAMPLE_RECIPES: list[dict[str, Any]] = [
    {
        "title": "Mediterranean Quinoa Bowl",
        "description": "A protein-rich quinoa bowl with fresh vegetables, feta cheese, and a tangy lemon dressing.",
        "image_url": _UNSPLASH.format(photo="photo-1546069901-ba9599a7e63c"),
        "prep_time": 15,
        "cooking_time": 15,
        "servings": 4,
        "ingredients": [
            "1 cup quinoa, rinsed",
            "2 cups vegetable broth",
            "1 cucumber, diced",
            "1 cup cherry tomatoes, halved",
            "1/2 red onion, finely diced",
            "1/2 cup kalamata olives, pitted and sliced",
            "1/2 cup feta cheese, crumbled",
            "1/4 cup fresh parsley, chopped",
            "3 tbsp extra virgin olive oil",
            "2 tbsp lemon juice",
            "1 clove garlic, minced",
            "Salt and pepper to taste",
        ],
        "instructions": [
            "Combine quinoa and vegetable broth in a saucepan, bring to a boil, then cover and simmer for 15 minutes.",
            "Whisk together olive oil, lemon juice, garlic, salt, and pepper for the dressing.",
            "Fluff the quinoa with a fork and let it cool for 5 minutes.",
            "Combine quinoa, cucumber, tomatoes, onion, olives, and parsley in a large bowl.",
            "Pour over the dressing and toss gently.",
            "Top with crumbled feta and serve, or refrigerate for up to 3 days.",
        ],
        "cuisine": "Mediterranean",
        "meal_type": "Lunch",
        "dietary_options": ["Vegetarian", "Gluten-Free"],
        "created_by": 1,
    },
    {
        "title": "Classic Margherita Pizza",
        "description": "Traditional Neapolitan pizza with San Marzano tomatoes, fresh mozzarella, and basil on a thin crust.",
        "image_url": _UNSPLASH.format(photo="photo-1565299624946-b28f40a0ae38"),
        "prep_time": 20,
        "cooking_time": 25,
        "servings": 2,
        "ingredients": [
            "Pizza dough for one 12-inch crust",
            "1/4 cup tomato sauce",
            "8 oz fresh mozzarella, sliced",
            "Fresh basil leaves",
            "2 tbsp olive oil",
            "Salt to taste",
        ],
        "instructions": [
            "Preheat the oven to 475°F (245°C) with a pizza stone if available.",
            "Roll out the dough to a 12-inch circle on a floured surface.",
            "Spread tomato sauce over the dough, leaving a 1/2-inch border.",
            "Arrange the mozzarella slices over the sauce.",
            "Bake for 10-12 minutes until the crust is golden and the cheese bubbles.",
            "Top with basil, drizzle with olive oil, sprinkle with salt, and serve.",
        ],
        "cuisine": "Italian",
        "meal_type": "Dinner",
        "dietary_options": ["Vegetarian"],
        "created_by": 1,
    },
    {
        "title": "Hearty Vegetable Soup",
        "description": "Comforting vegetable soup packed with seasonal produce, herbs, and a rich vegetable broth.",
        "image_url": _UNSPLASH.format(photo="photo-1512621776951-a57141f2eefd"),
        "prep_time": 20,
        "cooking_time": 40,
        "servings": 6,
        "ingredients": [
            "2 tbsp olive oil",
            "1 onion, diced",
            "2 carrots, diced",
            "2 celery stalks, diced",
            "3 cloves garlic, minced",
            "1 zucchini, diced",
            "1 cup green beans, trimmed and cut",
            "1 can (14 oz) diced tomatoes",
            "6 cups vegetable broth",
            "1 bay leaf",
            "1 tsp dried thyme",
            "1/4 cup fresh parsley, chopped",
            "Salt and pepper to taste",
        ],
        "instructions": [
            "Heat olive oil in a large pot and soften the onion, carrots, and celery for 5 minutes.",
            "Add garlic and cook for another minute.",
            "Add zucchini and green beans and cook for 3 minutes.",
            "Pour in the tomatoes and broth, then add the bay leaf and thyme.",
            "Bring to a boil, then simmer for 30 minutes until the vegetables are tender.",
            "Remove the bay leaf, stir in parsley, season, and serve hot.",
        ],
        "cuisine": "American",
        "meal_type": "Dinner",
        "dietary_options": ["Vegetarian", "Vegan", "Gluten-Free"],
        "created_by": 1,
    },
    {
        "title": "Fudgy Chocolate Brownies",
        "description": "Rich and decadent chocolate brownies with a crackly top and gooey center.",
        "image_url": _UNSPLASH.format(photo="photo-1563897539064-7f6d36ef5a1c"),
        "prep_time": 15,
        "cooking_time": 25,
        "servings": 12,
        "ingredients": [
            "1/2 cup butter",
            "1 cup granulated sugar",
            "2 eggs",
            "1 tsp vanilla extract",
            "1/2 cup all-purpose flour",
            "1/2 cup unsweetened cocoa powder",
            "1/4 tsp salt",
            "1/2 cup chocolate chips",
        ],
        "instructions": [
            "Preheat the oven to 350°F (175°C) and line an 8x8 inch pan with parchment.",
            "Melt the butter, add sugar, and mix well.",
            "Beat in the eggs one at a time, then stir in the vanilla.",
            "Combine flour, cocoa powder, and salt in a separate bowl.",
            "Fold the dry ingredients and chocolate chips into the wet mixture.",
            "Bake for 25-30 minutes and cool before cutting into squares.",
        ],
        "cuisine": "American",
        "meal_type": "Dessert",
        "dietary_options": ["Vegetarian"],
        "created_by": 1,
    },
    {
        "title": "Quick Vegetable Stir Fry",
        "description": "A lightning-fast weeknight dinner with fresh vegetables, tofu, and a savory sauce over steamed rice.",
        "image_url": _UNSPLASH.format(photo="photo-1562967914-608f82629710"),
        "prep_time": 10,
        "cooking_time": 15,
        "servings": 4,
        "ingredients": [
            "2 tbsp vegetable oil",
            "1 block (14 oz) firm tofu, cubed",
            "2 cloves garlic, minced",
            "1 tbsp ginger, grated",
            "1 red bell pepper, sliced",
            "1 carrot, julienned",
            "1 cup broccoli florets",
            "1 cup snap peas",
            "3 tbsp soy sauce",
            "1 tbsp rice vinegar",
            "1 tsp sesame oil",
            "1 tsp cornstarch mixed with 2 tbsp water",
            "Cooked rice for serving",
        ],
        "instructions": [
            "Stir-fry the tofu in hot oil until golden, about 5 minutes, then set aside.",
            "Stir-fry garlic and ginger for 30 seconds.",
            "Add pepper, carrot, broccoli, and snap peas and cook for 3-4 minutes.",
            "Mix soy sauce, rice vinegar, sesame oil, and the cornstarch slurry.",
            "Return the tofu, pour over the sauce, and toss until it thickens.",
            "Serve hot over steamed rice.",
        ],
        "cuisine": "Asian",
        "meal_type": "Dinner",
        "dietary_options": ["Vegetarian", "Vegan"],
        "created_by": 1,
    },
    {
        "title": "Street-Style Tacos",
        "description": "Mexican tacos with marinated steak, fresh cilantro, onions, and salsa on corn tortillas.",
        "image_url": _UNSPLASH.format(photo="photo-1551024709-8f23befc6f87"),
        "prep_time": 20,
        "cooking_time": 15,
        "servings": 4,
        "ingredients": [
            "1 lb flank steak, thinly sliced",
            "2 tbsp olive oil",
            "2 limes, juiced",
            "3 cloves garlic, minced",
            "1 tsp cumin",
            "1 tsp chili powder",
            "1/2 tsp paprika",
            "Salt and pepper to taste",
            "12 small corn tortillas",
            "1/2 cup white onion, finely diced",
            "1/2 cup fresh cilantro, chopped",
            "Lime wedges for serving",
            "Hot sauce or salsa",
        ],
        "instructions": [
            "Combine olive oil, lime juice, garlic, and spices in a bowl.",
            "Marinate the sliced steak for at least 30 minutes.",
            "Sear the steak in a hot skillet for 2-3 minutes per side.",
            "Warm the tortillas in a dry skillet until slightly charred.",
            "Fill each tortilla with steak, onion, and cilantro.",
            "Serve with lime wedges and salsa.",
        ],
        "cuisine": "Mexican",
        "meal_type": "Dinner",
        "dietary_options": ["Dairy-Free"],
        "created_by": 1,
    },
]


def seed_store(store: MemStore) -> None:
    """Insert the demo user (id 1) and the sample recipes (ids 1-6)."""
    store.create_user(DEMO_USER)
    for recipe in SAMPLE_RECIPES:
        store.create_recipe(recipe)
