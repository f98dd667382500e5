"""
Smoke tests for the Batched app.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app, create_app, init_db
    from models import db
    assert app is not None
    assert db is not None
    assert callable(create_app)
    assert callable(init_db)
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import Ingredient, Recipe, RecipeStep, RecipeIngredient
    assert Ingredient is not None
    assert Recipe is not None
    assert RecipeStep is not None
    assert RecipeIngredient is not None
    print("OK: Models import successfully")

def test_sanitizer_utils_import():
    """Verify sanitizer utilities can be imported."""
    from utils import sanitize_text, sanitize_recipe_name, sanitize_note
    assert callable(sanitize_text)
    assert callable(sanitize_recipe_name)
    assert callable(sanitize_note)
    print("OK: Sanitizer utils import successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import VOLUME_TO_TSP, WEIGHT_TO_OZ, STANDARD_UNITS, VALID_UNITS
    assert 'cup' in VOLUME_TO_TSP
    assert 'lb' in WEIGHT_TO_OZ
    assert len(STANDARD_UNITS) == 12
    assert 'fl oz' in VALID_UNITS
    print("OK: Constants import successfully")

def test_conversion_constants_unchanged():
    """Verify critical conversion constants have expected values."""
    from constants import VOLUME_TO_TSP, WEIGHT_TO_OZ

    # These values must not change
    assert VOLUME_TO_TSP['tsp'] == 1
    assert VOLUME_TO_TSP['tbsp'] == 3
    assert VOLUME_TO_TSP['fl oz'] == 6
    assert VOLUME_TO_TSP['cup'] == 48
    assert WEIGHT_TO_OZ['oz'] == 1
    assert WEIGHT_TO_OZ['lb'] == 16
    assert WEIGHT_TO_OZ['g'] == 0.035274
    assert WEIGHT_TO_OZ['kg'] == 35.274
    print("OK: Conversion constants unchanged")

def test_app_runs():
    """Verify app can create test client."""
    from app import create_app
    app = create_app('testing')
    with app.test_client() as client:
        response = client.get('/')
        assert response.status_code == 200
        assert response.get_json()['name'] == 'batched'
        print("OK: App serves index")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_sanitizer_utils_import,
        test_constants_import,
        test_conversion_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
