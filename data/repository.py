import copy
import json
import logging
from pathlib import Path

logger = logging.getLogger("pizzashop.repository")

SIGNATURE_SLOT = "{signature}"

DEFAULT_MENU = {
    "shop_name": "Syzygy",
    "base_price": 1050.0,
    "base_toppings": ["Cheese", SIGNATURE_SLOT, "Tomato Sauce"],
    # pizza type -> signature topping
    "pizzas": {
        "Chicken Pizza": "Chicken",
        "Margherita Pizza": "Margherita",
        "Veggie Pizza": "Vegetable",
        "Pepperoni Pizza": "Pepperoni",
    },
    "extra_toppings": [
        "Mushrooms",
        "Extra Cheese",
        "BBQ Sauce",
        "Pepperoni",
        "Mayonnaise",
        "Onions",
    ],
    "sizes": ["Medium", "Large", "Small"],
    "max_quantity": 10,
    "notification_timeout_ms": 5000,
    "splash_step_ms": 50,
}


def base_toppings_for(menu: dict, pizza_type: str) -> list[str]:
    # Fill the signature slot of the topping template for this pizza.
    # A type that is not on the menu just loses the slot.
    signature = menu.get("pizzas", {}).get(pizza_type)
    toppings = []
    for t in menu.get("base_toppings", []):
        if t == SIGNATURE_SLOT:
            if signature:
                toppings.append(signature)
        else:
            toppings.append(t)
    return toppings


class MenuRepository:
    def __init__(self, storage_dir: Path | str = "data/storage"):
        # base folder where the menu JSON lives
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str):
        # Load JSON from disk. A missing, empty or unreadable file
        # gives {} so the caller falls back to defaults.
        path = self._file_path(filename)
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return {}
                return json.loads(text)
        except (OSError, ValueError) as e:
            logger.warning(f"could not read {path}: {e}")
            return {}

    def _write_json(self, filename: str, data) -> None:
        path = self._file_path(filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_menu(self) -> dict:
        # Returns the menu configuration, defaults filled in per key.
        data = self._read_json("menu.json")
        if not isinstance(data, dict):
            data = {}

        menu = copy.deepcopy(DEFAULT_MENU)
        for key, value in data.items():
            if key in menu:
                menu[key] = value
        if not menu["pizzas"]:
            menu["pizzas"] = copy.deepcopy(DEFAULT_MENU["pizzas"])
        return menu

    def save_menu(self, menu: dict) -> None:
        self._write_json("menu.json", menu)
