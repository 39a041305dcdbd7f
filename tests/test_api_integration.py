"""API 端点集成测试"""
import random

import pytest
from fastapi.testclient import TestClient

from miniroll.config import Settings
from miniroll.dice import DiceRoller
from miniroll.web import create_app


def create_test_app(seed: int = 42, **overrides):
    """创建测试用的应用，使用固定种子和较小的限制"""
    settings = Settings(max_dice=20, max_times=5, **overrides)
    return create_app(roller=DiceRoller(random.Random(seed)), settings=settings)


@pytest.fixture
def client():
    return TestClient(create_test_app())


class TestRollEndpoint:
    """测试骰点端点"""

    def test_roll_notation(self, client):
        response = client.get("/api/dice/roll", params={"notation": "4d6kH3"})
        assert response.status_code == 200
        results = response.json()["results"]

        assert len(results) == 1
        result = results[0]
        assert len(result["kept"]) == 3
        assert len(result["dropped"]) == 1
        assert result["total"] == sum(result["kept"])
        assert result["source"] == "4d6kH3"
        assert result["short"] == "4d6kH3"

    def test_roll_percentile(self, client):
        response = client.get("/api/dice/roll", params={"notation": "10d%"})
        assert response.status_code == 200
        result = response.json()["results"][0]
        assert result["short"] == "10d100"
        assert all(1 <= v <= 100 for v in result["kept"])

    def test_roll_times(self, client):
        response = client.get("/api/dice/roll", params={"notation": "d20", "times": 3})
        assert response.status_code == 200
        assert len(response.json()["results"]) == 3

    def test_seeded_roller_is_reproducible(self):
        first = TestClient(create_test_app(seed=7)).get("/api/dice/roll", params={"notation": "6d6"})
        second = TestClient(create_test_app(seed=7)).get("/api/dice/roll", params={"notation": "6d6"})
        assert first.json() == second.json()

    def test_roll_spec_body(self, client):
        body = {"count": 4, "sides": 6, "selection": {"mode": "keep", "end": "highest", "count": 3}}
        response = client.post("/api/dice/roll", json=body)
        assert response.status_code == 200
        result = response.json()["results"][0]
        assert result["source"] == "4d6kH3"
        assert len(result["kept"]) == 3

    def test_roll_spec_body_without_selection(self, client):
        response = client.post("/api/dice/roll", json={"sides": 8})
        assert response.status_code == 200
        assert response.json()["results"][0]["source"] == "1d8"


class TestDescribeEndpoints:
    """测试描述与解析端点"""

    def test_describe(self, client):
        response = client.get("/api/dice/describe", params={"notation": "2d20-H"})
        assert response.status_code == 200
        assert response.json() == {
            "notation": "2d20-H",
            "description": "roll 2 20-sided dice and drop the highest",
            "short": "2d20dH",
        }

    def test_parse(self, client):
        response = client.get("/api/dice/parse", params={"notation": "4d6dL"})
        assert response.status_code == 200
        assert response.json() == {
            "count": 4,
            "sides": 6,
            "selection": {"mode": "drop", "end": "lowest", "count": 1},
        }

    def test_parse_without_selection(self, client):
        response = client.get("/api/dice/parse", params={"notation": "d%"})
        assert response.json() == {"count": 1, "sides": 100, "selection": None}


class TestAPIErrorHandling:
    """测试 API 错误处理"""

    @pytest.mark.parametrize("path", ["/api/dice/roll", "/api/dice/describe", "/api/dice/parse"])
    def test_bad_notation(self, client, path):
        """测试非法表达式返回 400"""
        response = client.get(path, params={"notation": "3d6x"})
        assert response.status_code == 400
        data = response.json()
        assert data["code"] == 400
        assert data["detail"] == "3d6x"

    def test_too_many_dice(self, client):
        response = client.get("/api/dice/roll", params={"notation": "21d6"})
        assert response.status_code == 422
        assert "Too many dice" in response.json()["message"]

    def test_too_many_times(self, client):
        response = client.get("/api/dice/roll", params={"notation": "d6", "times": 6})
        assert response.status_code == 422

    def test_invalid_times(self, client):
        response = client.get("/api/dice/roll", params={"notation": "d6", "times": 0})
        assert response.status_code == 422

    def test_invalid_spec_body(self, client):
        response = client.post("/api/dice/roll", json={"count": 0, "sides": 1})
        assert response.status_code == 422

    def test_missing_notation(self, client):
        response = client.get("/api/dice/roll")
        assert response.status_code == 422

    def test_not_found(self, client):
        response = client.get("/nonexistent")
        assert response.status_code == 404

    def test_method_not_allowed(self, client):
        response = client.post("/health")
        assert response.status_code == 405


class TestHealthEndpoint:
    """测试健康检查端点"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["uptime_seconds"] >= 0
        assert "version" in data
