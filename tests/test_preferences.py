from pinkplate.models.preferences import (
    DEFAULT_INGREDIENTS,
    CityType,
    KitchenSetup,
    OptimizationFocus,
    UserPreferences,
    normalize_ingredient,
)


def test_defaults():
    prefs = UserPreferences()
    assert prefs.cityType == CityType.TIER2
    assert prefs.dietType == "Vegetarian"
    assert prefs.budgetPerDay == 150
    assert prefs.timePerMeal == 25
    assert prefs.kitchenSetup == KitchenSetup.MEDIUM
    assert prefs.ingredients == DEFAULT_INGREDIENTS
    assert prefs.days == 2


def test_default_ingredients_are_not_shared_between_instances():
    first = UserPreferences()
    second = UserPreferences()
    first.add_ingredient("paneer")
    assert "paneer" not in second.ingredients
    assert "paneer" not in DEFAULT_INGREDIENTS


def test_normalize_ingredient():
    assert normalize_ingredient("  Paneer ") == "paneer"
    assert normalize_ingredient("   ") == ""
    assert normalize_ingredient(None) == ""


def test_add_ingredient_normalizes_and_appends():
    prefs = UserPreferences(ingredients=["rice"])
    assert prefs.add_ingredient("  Green Peas ") is True
    assert prefs.ingredients == ["rice", "green peas"]


def test_add_duplicate_ingredient_is_noop():
    prefs = UserPreferences(ingredients=["rice", "dal"])
    assert prefs.add_ingredient("RICE") is False
    assert prefs.add_ingredient(" dal ") is False
    assert prefs.ingredients == ["rice", "dal"]


def test_add_empty_ingredient_is_noop():
    prefs = UserPreferences(ingredients=["rice"])
    assert prefs.add_ingredient("") is False
    assert prefs.add_ingredient("    ") is False
    assert prefs.ingredients == ["rice"]


def test_remove_ingredient():
    prefs = UserPreferences(ingredients=["rice", "dal", "onions"])
    assert prefs.remove_ingredient("dal") is True
    assert prefs.ingredients == ["rice", "onions"]


def test_remove_missing_ingredient_is_noop():
    prefs = UserPreferences(ingredients=["rice", "dal"])
    assert prefs.remove_ingredient("paneer") is False
    # Removal matches the stored value exactly
    assert prefs.remove_ingredient("Rice") is False
    assert prefs.ingredients == ["rice", "dal"]


def test_enum_setters_accept_members_and_values():
    prefs = UserPreferences()
    prefs.set_city_type(CityType.TIER1)
    assert prefs.cityType == CityType.TIER1
    prefs.set_city_type("Tier-3")
    assert prefs.cityType == CityType.TIER3
    prefs.set_kitchen_setup("Full (Oven, Microwave, Mixer, Stove)")
    assert prefs.kitchenSetup == KitchenSetup.FULL


def test_enum_setters_ignore_unknown_values():
    prefs = UserPreferences()
    prefs.set_city_type("Tier-9")
    prefs.set_kitchen_setup("Campfire")
    assert prefs.cityType == CityType.TIER2
    assert prefs.kitchenSetup == KitchenSetup.MEDIUM


def test_numeric_setters():
    prefs = UserPreferences()
    prefs.set_budget(200)
    prefs.set_time_per_meal(15)
    prefs.set_days(5)
    assert (prefs.budgetPerDay, prefs.timePerMeal, prefs.days) == (200, 15, 5)


def test_numeric_setters_keep_invariants():
    prefs = UserPreferences()
    prefs.set_budget(0)
    prefs.set_budget(-50)
    prefs.set_budget(float("nan"))
    prefs.set_time_per_meal(0)
    prefs.set_days(0)
    prefs.set_days(2.5)
    prefs.set_days(True)
    assert (prefs.budgetPerDay, prefs.timePerMeal, prefs.days) == (150, 25, 2)


def test_set_diet_type():
    prefs = UserPreferences()
    prefs.set_diet_type(" Eggetarian ")
    assert prefs.dietType == "Eggetarian"
    prefs.set_diet_type("  ")
    assert prefs.dietType == "Eggetarian"


def test_snapshot_is_independent():
    prefs = UserPreferences(ingredients=["rice"])
    snapshot = prefs.snapshot()
    prefs.add_ingredient("dal")
    prefs.set_days(4)
    assert snapshot.ingredients == ["rice"]
    assert snapshot.days == 2


def test_optimization_focus_values():
    assert [focus.value for focus in OptimizationFocus] == ["balanced", "cheapest", "fastest", "protein"]


def test_constructor_normalizes_ingredients():
    prefs = UserPreferences(ingredients=["Rice", "rice", "  ", "Dal "])
    assert prefs.ingredients == ["rice", "dal"]


def test_model_validate_normalizes_ingredients():
    prefs = UserPreferences.model_validate({"ingredients": [" Onions", "", "ONIONS", "Paneer", "onions "]})
    assert prefs.ingredients == ["onions", "paneer"]


def test_set_time_per_meal_ignores_fractional_minutes():
    prefs = UserPreferences()
    prefs.set_time_per_meal(2.7)
    assert prefs.timePerMeal == 25
    prefs.set_time_per_meal(15.0)
    assert prefs.timePerMeal == 15
