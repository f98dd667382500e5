import logging

from flask import Flask, Blueprint, current_app, jsonify, request, abort
from flask_migrate import Migrate
from sqlalchemy.exc import OperationalError

from config import get_config
from constants import UNIT_OPTIONS
from models import db
from services.catalog import load_catalog
from services.conversion import UnknownUnitError
from services.recipes import (
    RecipeValidationError,
    get_recipe, get_all_recipes, create_recipe, update_recipe,
    delete_recipe, delete_recipes_bulk, get_all_ingredients,
    search_saved_ingredients, migrate_instructions_to_steps,
)
from services.reminders import export_to_reminders
from services.search import IngredientSearch
from services.shopping import (
    ConsolidatedIngredient, InvalidShoppingItemError, consolidate_ingredients,
)
from services.updates import check_for_updates

logger = logging.getLogger(__name__)

migrate = Migrate()

api = Blueprint('api', __name__, url_prefix='/api')


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def get_json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description='Expected a JSON object')
    return data


# ============================================
# ROUTES - RECIPES
# ============================================

@api.route('/recipes')
def recipes_list():
    return jsonify([recipe.to_dict() for recipe in get_all_recipes()])


@api.route('/recipes/<recipe_id>')
def recipe_view(recipe_id):
    recipe = get_recipe(recipe_id)
    if recipe is None:
        abort(404, description='Recipe not found')
    return jsonify(recipe.to_dict())


@api.route('/recipes', methods=['POST'])
def recipe_add():
    recipe = create_recipe(get_json_body())
    return jsonify(recipe.to_dict()), 201


@api.route('/recipes/<recipe_id>', methods=['PUT'])
def recipe_edit(recipe_id):
    recipe = update_recipe(recipe_id, get_json_body())
    if recipe is None:
        abort(404, description='Recipe not found')
    return jsonify(recipe.to_dict())


@api.route('/recipes/<recipe_id>', methods=['DELETE'])
def recipe_delete(recipe_id):
    if not delete_recipe(recipe_id):
        abort(404, description='Recipe not found')
    return jsonify({'deleted': 1})


@api.route('/recipes/delete-bulk', methods=['POST'])
def recipe_delete_bulk():
    ids = get_json_body().get('ids') or []
    return jsonify({'deleted': delete_recipes_bulk(ids)})


# ============================================
# ROUTES - INGREDIENTS
# ============================================

@api.route('/ingredients')
def ingredients_list():
    return jsonify([ing.to_dict() for ing in get_all_ingredients()])


@api.route('/ingredients/search')
def ingredients_search():
    results = search_saved_ingredients(request.args.get('q', ''))
    return jsonify([ing.to_dict() for ing in results])


@api.route('/catalog/search')
def catalog_search():
    """Ranked catalog suggestions for the ingredient picker."""
    query = request.args.get('q', '')
    limit = safe_int(request.args.get('limit'), default=current_app.config['SEARCH_LIMIT'],
                     min_val=1, max_val=100)
    search = current_app.extensions['ingredient_search']

    results = search.search(query, limit)
    suggestion = search.suggest(query) if not results and query.strip() else None
    return jsonify({
        'results': [entry.to_dict() for entry in results],
        'suggestion': suggestion,
    })


@api.route('/units')
def units_list():
    return jsonify(UNIT_OPTIONS)


# ============================================
# ROUTES - SHOPPING
# ============================================

@api.route('/shopping/consolidate', methods=['POST'])
def shopping_consolidate():
    recipe_ids = get_json_body().get('recipe_ids') or []
    items = consolidate_ingredients(recipe_ids, get_recipe)
    return jsonify({'items': [item.to_dict() for item in items]})


@api.route('/shopping/export', methods=['POST'])
def shopping_export():
    items = get_json_body().get('items') or []
    if not isinstance(items, list):
        abort(400, description='Expected a list of items')
    items = [ConsolidatedIngredient.from_dict(item) for item in items]
    result = export_to_reminders(
        items,
        list_name=current_app.config['REMINDERS_LIST_NAME'],
        chunk_size=current_app.config['REMINDERS_CHUNK_SIZE'],
    )
    return jsonify(result.to_dict()), (200 if result.ok else 502)


# ============================================
# ROUTES - APP
# ============================================

@api.route('/app/version')
def app_version():
    return jsonify({'version': current_app.config['APP_VERSION']})


@api.route('/app/updates')
def app_updates():
    result = check_for_updates(
        current_app.config['APP_VERSION'],
        current_app.config['UPDATE_REPO'],
        timeout=current_app.config['UPDATE_TIMEOUT'],
    )
    return jsonify(result.to_dict())


# ============================================
# ERROR HANDLERS
# ============================================

@api.errorhandler(RecipeValidationError)
@api.errorhandler(InvalidShoppingItemError)
def handle_validation_error(e):
    return jsonify({'error': str(e)}), 400


@api.errorhandler(UnknownUnitError)
def handle_unknown_unit(e):
    # A stored unit outside the enumeration means a corrupted record
    logger.error("Data integrity error: %s", e)
    return jsonify({'error': str(e)}), 500


def handle_http_error(e):
    return jsonify({'error': e.description}), e.code


# ============================================
# APP FACTORY
# ============================================

def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    db.init_app(app)
    migrate.init_app(app, db)

    # Catalog and search index are built once; restart to pick up catalog changes
    catalog = load_catalog(app.config['CATALOG_PATH'])
    app.extensions['catalog'] = catalog
    app.extensions['ingredient_search'] = IngredientSearch(
        catalog, threshold=app.config['SEARCH_THRESHOLD'])

    app.register_blueprint(api)
    for code in (400, 404, 405):
        app.register_error_handler(code, handle_http_error)

    @app.route('/')
    def index():
        return jsonify({'name': 'batched', 'version': app.config['APP_VERSION']})

    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()

        # Add new columns if they don't exist (for existing databases)
        with db.engine.connect() as conn:
            # Check and add note to recipe_ingredient
            try:
                conn.execute(db.text("SELECT note FROM recipe_ingredient LIMIT 1"))
            except OperationalError:
                conn.execute(db.text("ALTER TABLE recipe_ingredient ADD COLUMN note VARCHAR(200)"))
                conn.commit()

            # Check and add slug to ingredient
            try:
                conn.execute(db.text("SELECT slug FROM ingredient LIMIT 1"))
            except OperationalError:
                conn.execute(db.text("ALTER TABLE ingredient ADD COLUMN slug VARCHAR(200)"))
                conn.commit()

        migrate_instructions_to_steps()


app = create_app()


if __name__ == '__main__':
    init_db(app)
    app.run(debug=app.config.get('DEBUG', False), host='127.0.0.1', port=5000, use_reloader=False)
