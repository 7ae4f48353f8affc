from pantry_recipes.app.schemas.recipe import RecipeCreate
from pantry_recipes.app.services import recipes_service


def recipe_payload(ids, name="Pancakes"):
    return {
        "name": name,
        "instructions": "  Mix and fry.  ",
        "ingredients": [
            {"ingredient_id": ids["Milk"], "quantity": "300", "unit": " ml "},
            {"ingredient_id": ids["Flour"], "quantity": "200", "unit": "g"},
            {"ingredient_id": ids["Eggs"], "quantity": 2, "unit": "  "},
        ],
    }


def test_create_recipe(client, add_ingredients):
    ids = add_ingredients("Flour", "Eggs", "Milk")
    response = client.post("/api/recipes", json=recipe_payload(ids))
    assert response.status_code == 201
    body = response.json()
    assert response.headers["location"] == f"/api/recipes/{body['id']}"
    assert body["name"] == "Pancakes"
    assert body["instructions"] == "Mix and fry."
    assert [i["name"] for i in body["ingredients"]] == ["Eggs", "Flour", "Milk"]
    eggs, flour, milk = body["ingredients"]
    assert eggs["unit"] is None
    assert float(eggs["quantity"]) == 2
    assert milk["unit"] == "ml"
    assert flour["ingredient_id"] == ids["Flour"]


def test_get_and_list_recipes(client, add_ingredients):
    ids = add_ingredients("Flour", "Eggs", "Milk")
    created = client.post("/api/recipes", json=recipe_payload(ids, name="Waffles")).json()
    client.post("/api/recipes", json=recipe_payload(ids, name="Crepes"))

    response = client.get(f"/api/recipes/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    names = [r["name"] for r in client.get("/api/recipes").json()]
    assert names == ["Crepes", "Waffles"]

    assert client.get("/api/recipes/999").status_code == 404


def test_create_recipe_validation(client, add_ingredients):
    ids = add_ingredients("Flour", "Eggs", "Milk")

    blank = recipe_payload(ids, name="   ")
    response = client.post("/api/recipes", json=blank)
    assert response.status_code == 400
    assert response.json()["detail"] == "Name is required."

    no_ingredients = recipe_payload(ids)
    no_ingredients["ingredients"] = [{"ingredient_id": 0}, {"ingredient_id": -3}]
    response = client.post("/api/recipes", json=no_ingredients)
    assert response.status_code == 400
    assert response.json()["detail"] == "At least one ingredient is required."

    unknown = recipe_payload(ids)
    unknown["ingredients"].append({"ingredient_id": 4242})
    response = client.post("/api/recipes", json=unknown)
    assert response.status_code == 400
    assert response.json()["detail"] == {"message": "Unknown ingredient IDs.", "missing_ingredient_ids": [4242]}

    missing_name = {"ingredients": [{"ingredient_id": ids["Flour"]}]}
    response = client.post("/api/recipes", json=missing_name)
    assert response.status_code == 422
    assert response.json()["error_code"] == "validation_error"


def test_create_recipe_duplicate_name(client, add_ingredients):
    ids = add_ingredients("Flour", "Eggs", "Milk")
    assert client.post("/api/recipes", json=recipe_payload(ids)).status_code == 201
    response = client.post("/api/recipes", json=recipe_payload(ids))
    assert response.status_code == 409
    assert response.json()["detail"] == "Recipe already exists."


def test_repeated_ingredient_ids_keep_first(db_session, add_ingredients):
    ids = add_ingredients("Rice")
    data = RecipeCreate(
        name="Rice",
        ingredients=[
            {"ingredient_id": ids["Rice"], "quantity": "1", "unit": "cup"},
            {"ingredient_id": ids["Rice"], "quantity": "5", "unit": "kg"},
        ],
    )
    recipe = recipes_service.create_recipe(db_session, data)
    read = recipes_service.to_recipe_read(recipe)
    assert len(read.ingredients) == 1
    assert read.ingredients[0].unit == "cup"


def test_delete_recipe(client, add_ingredients):
    ids = add_ingredients("Flour", "Eggs", "Milk")
    created = client.post("/api/recipes", json=recipe_payload(ids)).json()
    assert client.delete(f"/api/recipes/{created['id']}").status_code == 204
    assert client.get(f"/api/recipes/{created['id']}").status_code == 404
    assert client.delete(f"/api/recipes/{created['id']}").status_code == 404
    # ingredients survive the recipe
    assert len(client.get("/api/ingredients").json()) == 3


def test_can_make(client, add_ingredients):
    ids = add_ingredients("Pasta", "Tomato", "Basil", "Bread", "Butter")
    client.post(
        "/api/recipes",
        json={"name": "Tomato Pasta", "ingredients": [{"ingredient_id": ids["Pasta"]}, {"ingredient_id": ids["Tomato"]}]},
    )
    client.post(
        "/api/recipes",
        json={"name": "Basil Pasta", "ingredients": [{"ingredient_id": ids["Pasta"]}, {"ingredient_id": ids["Basil"]}]},
    )
    client.post(
        "/api/recipes",
        json={"name": "Buttered Toast", "ingredients": [{"ingredient_id": ids["Bread"]}, {"ingredient_id": ids["Butter"]}]},
    )

    def can_make(*names):
        params = [("ingredient_ids", ids[name]) for name in names]
        response = client.get("/api/recipes/can-make", params=params)
        assert response.status_code == 200
        return [r["name"] for r in response.json()]

    assert can_make("Pasta", "Tomato", "Basil") == ["Basil Pasta", "Tomato Pasta"]
    assert can_make("Pasta", "Tomato", "Tomato") == ["Tomato Pasta"]
    assert can_make("Pasta") == []
    assert can_make("Bread", "Butter", "Pasta", "Basil") == ["Basil Pasta", "Buttered Toast"]


def test_can_make_without_ingredients(client, add_ingredients):
    ids = add_ingredients("Rice")
    client.post("/api/recipes", json={"name": "Rice", "ingredients": [{"ingredient_id": ids["Rice"]}]})
    response = client.get("/api/recipes/can-make")
    assert response.status_code == 200
    assert response.json() == []
    assert client.get("/api/recipes/can-make", params={"ingredient_ids": 999}).json() == []


def test_can_make_summary_shape(db_session, add_ingredients):
    ids = add_ingredients("Rice")
    recipes_service.create_recipe(db_session, RecipeCreate(name="Rice", ingredients=[{"ingredient_id": ids["Rice"]}]))
    recipes = recipes_service.list_makeable_recipes(db_session, [ids["Rice"], ids["Rice"]])
    assert [(r.name, r.id > 0) for r in recipes] == [("Rice", True)]
