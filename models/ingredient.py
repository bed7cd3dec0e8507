from dataclasses import dataclass
# Ingredient pool: one shared Ingredient per distinct topping name.


@dataclass(frozen=True)
class Ingredient:
    name: str


class IngredientPool:
    def __init__(self):
        self.ingredients: dict[str, Ingredient] = {}  # name -> ingredient

    def intern(self, name: str) -> Ingredient:
        ingredient = self.ingredients.get(name)
        if ingredient is None:
            ingredient = Ingredient(name)
            self.ingredients[name] = ingredient
        return ingredient

    def __contains__(self, name: str) -> bool:
        return name in self.ingredients

    def __len__(self) -> int:
        return len(self.ingredients)
