"""Pytest configuration and shared fixtures."""

import copy

import pytest
from typing import Dict, Any

from receipt_points.config.defaults import get_default_config
from receipt_points.engine import ReceiptProcessingEngine
from receipt_points.persistence.score_store import ScoreStore
from receipt_points.scoring.calculator import PointsCalculator


TARGET_RECEIPT: Dict[str, Any] = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT: Dict[str, Any] = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_receipt() -> Dict[str, Any]:
    """Five-item Target receipt worth 33 points."""
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_receipt() -> Dict[str, Any]:
    """Four-item M&M Corner Market receipt worth 109 points."""
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def two_item_corner_market_receipt() -> Dict[str, Any]:
    """Two Gatorades at 2.25 with a 9.00 total, bought at 14:33 (104 points)."""
    receipt = copy.deepcopy(CORNER_MARKET_RECEIPT)
    receipt["items"] = receipt["items"][:2]
    return receipt


@pytest.fixture
def two_item_target_receipt() -> Dict[str, Any]:
    """Two-item Target receipt that hits every rule but round dollar (63 points)."""
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "14:01",
        "items": [
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Klarbrunn 12-PK 12 FL OZ", "price": "12.00"},
        ],
        "total": "24.25",
    }


@pytest.fixture
def malformed_total_receipt() -> Dict[str, Any]:
    """Walgreens receipt whose total is not a number."""
    return {
        "retailer": "Walgreens",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "08:13",
        "items": [
            {"shortDescription": "Pepsi - 12-oz", "price": "1.25"},
            {"shortDescription": "Dasani", "price": "1.40"},
        ],
        "total": "abc",
    }


@pytest.fixture
def calculator() -> PointsCalculator:
    """Calculator with default scoring parameters."""
    return PointsCalculator(get_default_config().scoring)


@pytest.fixture
def store() -> ScoreStore:
    """Empty score store."""
    return ScoreStore()


@pytest.fixture
def engine(store: ScoreStore, tmp_path) -> ReceiptProcessingEngine:
    """Engine on defaults only (empty config directory) with its own store."""
    return ReceiptProcessingEngine(store=store, config_dir=tmp_path)
