"""Tests for the JSON API."""

from unittest import mock

from models import db, Recipe, RecipeIngredient
from services.recipes import get_or_create_ingredient
from services.reminders import ExportResult
from services.updates import UpdateCheck

CHILI = {
    'name': 'Chili',
    'steps': ['Brown the beef', 'Simmer'],
    'ingredients': [
        {'ingredient': {'display_name': 'Onions', 'slug': 'onions'}, 'quantity': 1, 'unit': 'cup', 'note': 'Red'},
        {'ingredient': {'display_name': 'Black Beans'}, 'quantity': 2, 'unit': 'cup'},
    ],
}


def test_index(client):
    resp = client.get('/')
    assert resp.status_code == 200
    assert resp.get_json()['name'] == 'batched'


def test_recipe_crud(client):
    resp = client.post('/api/recipes', json=CHILI)
    assert resp.status_code == 201
    recipe = resp.get_json()
    assert recipe['name'] == 'Chili'
    assert [s['step_number'] for s in recipe['steps']] == [1, 2]
    onion = next(ri for ri in recipe['ingredients'] if ri['note'] == 'Red')
    assert onion['ingredient']['image'] == 'onions.jpg'

    resp = client.get(f"/api/recipes/{recipe['id']}")
    assert resp.get_json()['id'] == recipe['id']

    resp = client.put(f"/api/recipes/{recipe['id']}", json={**CHILI, 'name': 'Vegan Chili'})
    assert resp.status_code == 200
    assert resp.get_json()['name'] == 'Vegan Chili'

    assert [r['name'] for r in client.get('/api/recipes').get_json()] == ['Vegan Chili']

    resp = client.delete(f"/api/recipes/{recipe['id']}")
    assert resp.get_json() == {'deleted': 1}
    assert client.get(f"/api/recipes/{recipe['id']}").status_code == 404


def test_recipe_not_found(client):
    resp = client.get('/api/recipes/missing')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Recipe not found'}
    assert client.put('/api/recipes/missing', json={'name': 'X'}).status_code == 404
    assert client.delete('/api/recipes/missing').status_code == 404


def test_invalid_recipe_is_400(client):
    resp = client.post('/api/recipes', json={'name': 'Soup', 'ingredients': [
        {'ingredient': {'display_name': 'Salt'}, 'quantity': 1, 'unit': 'pinch'},
    ]})
    assert resp.status_code == 400
    assert 'pinch' in resp.get_json()['error']


def test_non_object_body_is_400(client):
    resp = client.post('/api/recipes', json=['not', 'an', 'object'])
    assert resp.status_code == 400


def test_delete_bulk(client):
    ids = [client.post('/api/recipes', json={'name': n}).get_json()['id'] for n in ('A', 'B')]
    resp = client.post('/api/recipes/delete-bulk', json={'ids': ids})
    assert resp.get_json() == {'deleted': 2}


def test_ingredients(client):
    client.post('/api/recipes', json=CHILI)
    names = [i['display_name'] for i in client.get('/api/ingredients').get_json()]
    assert names == ['Black Beans', 'Onions']

    found = client.get('/api/ingredients/search?q=bean').get_json()
    assert [i['canonical_name'] for i in found] == ['black bean']


def test_catalog_search(client):
    resp = client.get('/api/catalog/search?q=oat')
    data = resp.get_json()
    assert [r['name'] for r in data['results']][:2] == ['Oat Bran', 'Steel Cut Oats']
    assert data['suggestion'] is None


def test_catalog_search_limit(client):
    data = client.get('/api/catalog/search?q=chicken&limit=1').get_json()
    assert [r['name'] for r in data['results']] == ['Chicken']


def test_catalog_search_blank_query(client):
    data = client.get('/api/catalog/search?q=').get_json()
    assert data == {'results': [], 'suggestion': None}


def test_units(client):
    units = client.get('/api/units').get_json()
    assert len(units) == 12
    assert {'value': 'fl oz', 'label': 'fl oz'} in units


def test_consolidate(client):
    chili = client.post('/api/recipes', json=CHILI).get_json()
    tacos = client.post('/api/recipes', json={'name': 'Tacos', 'ingredients': [
        {'ingredient': {'display_name': 'black bean'}, 'quantity': 8, 'unit': 'tbsp'},
    ]}).get_json()

    resp = client.post('/api/shopping/consolidate', json={'recipe_ids': [chili['id'], tacos['id']]})
    items = resp.get_json()['items']

    assert [i['ingredient']['display_name'] for i in items] == ['Black Beans', 'Onions']
    beans = items[0]
    assert (beans['total_quantity'], beans['unit']) == (2.5, 'cup')
    assert beans['from_recipes'] == ['Chili', 'Tacos']
    assert beans['already_have'] is False
    assert items[1]['note'] == 'Red'


def test_consolidate_unknown_unit_is_500(app, client):
    recipe = Recipe(name='Broken')
    recipe.ingredients.append(RecipeIngredient(
        ingredient=get_or_create_ingredient('Salt'), quantity=1, unit='pinch'))
    db.session.add(recipe)
    db.session.commit()

    resp = client.post('/api/shopping/consolidate', json={'recipe_ids': [recipe.id]})
    assert resp.status_code == 500
    assert 'pinch' in resp.get_json()['error']


@mock.patch('app.export_to_reminders')
def test_export(mock_export, client):
    mock_export.return_value = ExportResult(ok=True, exported=1)
    items = [{
        'ingredient': {'display_name': 'Flour'}, 'total_quantity': 1.13, 'unit': 'cup',
        'from_recipes': ['Bread'], 'already_have': False, 'note': None,
    }]

    resp = client.post('/api/shopping/export', json={'items': items})

    assert resp.status_code == 200
    assert resp.get_json() == {'ok': True, 'exported': 1, 'error': None}
    exported = mock_export.call_args.args[0]
    assert exported[0].display_name == 'Flour'
    assert mock_export.call_args.kwargs['list_name'] == 'Batched Shopping List'


@mock.patch('app.export_to_reminders')
def test_export_failure_is_502(mock_export, client):
    mock_export.return_value = ExportResult(ok=False, error='osascript is not available on this system')
    resp = client.post('/api/shopping/export', json={'items': []})
    assert resp.status_code == 502


def test_version(client):
    assert client.get('/api/app/version').get_json() == {'version': '1.0.0'}


@mock.patch('app.check_for_updates')
def test_updates(mock_check, client):
    mock_check.return_value = UpdateCheck(ok=True, current_version='1.0.0', latest_version='1.0.0')
    data = client.get('/api/app/updates').get_json()
    assert data['ok'] is True
    assert data['update_available'] is False
    assert mock_check.call_args.args == ('1.0.0', 'ohjey/batched-app')


def test_infinite_quantity_is_400(client):
    resp = client.post('/api/recipes', json={'name': 'Soup', 'ingredients': [
        {'ingredient': {'display_name': 'Salt'}, 'quantity': 'Infinity', 'unit': 'tsp'},
    ]})
    assert resp.status_code == 400
    assert client.get('/api/recipes').get_json() == []


@mock.patch('app.export_to_reminders')
def test_export_malformed_items_is_400(mock_export, client):
    resp = client.post('/api/shopping/export', json={'items': [
        {'ingredient': {'display_name': 'Flour'}, 'total_quantity': 'a lot', 'unit': 'cup'},
    ]})
    assert resp.status_code == 400
    assert 'a lot' in resp.get_json()['error']

    resp = client.post('/api/shopping/export', json={'items': 'Flour'})
    assert resp.status_code == 400
    mock_export.assert_not_called()
