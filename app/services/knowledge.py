import copy
import json
import logging
import os
from types import MappingProxyType
from typing import Any, Dict

from app.constants.market import MARKET_PRICES, FALLBACK_PRICES

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir, "data")
DEFAULT_PLANNER_CROP = "rice"


class KnowledgeService:
    """
    Static agronomy reference data: crop planners, the knowledge base and
    market prices. Loaded once; callers always receive copies.
    """

    def __init__(self,
                 planners_path: str = os.path.join(DATA_DIR, "crop_planners.json"),
                 knowledge_path: str = os.path.join(DATA_DIR, "knowledge_base.json")):
        self.planners = MappingProxyType(self._load_json(planners_path))
        self.knowledge = MappingProxyType(self._load_json(knowledge_path))

        if DEFAULT_PLANNER_CROP not in self.planners:
            raise RuntimeError(f"Crop planner data must include '{DEFAULT_PLANNER_CROP}'")

    @staticmethod
    def _load_json(path: str) -> Dict[str, Any]:
        with open(path, mode='r', encoding='utf-8') as f:
            data = json.load(f)
        logger.info(f"Loaded {len(data)} entries from {os.path.basename(path)}")
        return data

    def get_planner(self, crop: str) -> Dict[str, Any]:
        """Planner for a crop; unknown crops get the rice planner."""
        planner = self.planners.get(crop.strip().lower(), self.planners[DEFAULT_PLANNER_CROP])
        return copy.deepcopy(planner)

    def get_knowledge_base(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self.knowledge))

    @staticmethod
    def get_market_prices(crop: str) -> Dict[str, Any]:
        prices = MARKET_PRICES.get(crop.strip().lower(), FALLBACK_PRICES)
        return dict(prices)



# Global Instance
knowledge_service = KnowledgeService()
