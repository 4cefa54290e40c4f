import json
import random
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from lumisky import recipe
from lumisky.engine import Engine
from lumisky.models import FireworkConfig, Shape
from lumisky.recipe import RecipeClient, RecipeError, config_from_payload, fallback_config


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(content=None, error=None):
    completions = FakeCompletions(content, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


FULL_PAYLOAD = {
    "colors": ["#fbbf24", "#ffffff"],
    "particleCount": 180,
    "shape": "willow",
    "friction": 0.97,
    "gravity": 0.02,
    "decay": 0.007,
    "initialVelocity": 5,
}


def test_full_payload_maps_onto_config():
    cfg = config_from_payload(FULL_PAYLOAD, name="gold rain")
    assert cfg.colors == ("#fbbf24", "#ffffff")
    assert cfg.particle_count == 180
    assert cfg.shape is Shape.WILLOW
    assert cfg.physics.friction == 0.97
    assert cfg.physics.gravity == 0.02
    assert cfg.physics.decay == 0.007
    assert cfg.physics.initial_velocity == 5
    assert cfg.name == "gold rain"


def test_missing_fields_get_defaults():
    cfg = config_from_payload({})
    assert cfg.colors == ("#ffffff",)
    assert cfg.particle_count == 100
    assert cfg.shape is Shape.SPHERE
    assert cfg.physics == fallback_config().physics


def test_out_of_range_values_are_clamped():
    cfg = config_from_payload(
        {
            "colors": "#ff00ff",
            "particleCount": 10_000,
            "shape": "Spiral",
            "friction": 3,
            "decay": 0.9,
            "initialVelocity": -4,
            "gravity": "heavy",
        }
    )
    assert cfg.colors == ("#ff00ff",)
    assert cfg.particle_count == 500
    assert cfg.shape is Shape.SPHERE
    assert cfg.physics.friction == 0.99
    assert cfg.physics.decay == 0.2
    assert cfg.physics.initial_velocity == 0.0
    assert cfg.physics.gravity == 0.04


def test_non_object_payload_is_rejected():
    with pytest.raises(RecipeError):
        config_from_payload(["#fff"])


def test_fallback_is_a_plain_random_sphere():
    cfg = fallback_config(random.Random(3))
    assert len(cfg.colors) == 1
    assert cfg.colors[0].startswith("#")
    assert cfg.particle_count == 100
    assert cfg.shape is Shape.SPHERE


def test_client_builds_config_from_json_answer():
    client, completions = fake_client(json.dumps(FULL_PAYLOAD))
    cfg = RecipeClient(client=client).generate("slow falling gold")
    assert cfg.shape is Shape.WILLOW
    assert cfg.particle_count == 180

    call = completions.calls[0]
    assert call["response_format"] == {"type": "json_object"}
    assert "slow falling gold" in call["messages"][-1]["content"]


@pytest.mark.parametrize(
    "content,error",
    [
        (None, OpenAIError("connection reset")),
        ("this is not json", None),
        ("[1, 2, 3]", None),
    ],
)
def test_client_failures_become_fallback(content, error):
    client, _ = fake_client(content, error)
    cfg = RecipeClient(client=client).generate("anything")
    assert isinstance(cfg, FireworkConfig)
    assert cfg.name == "Fallback"
    assert cfg.shape is Shape.SPHERE


@pytest.mark.parametrize(
    "response",
    [
        SimpleNamespace(choices=[]),
        SimpleNamespace(choices=None),
        SimpleNamespace(),
    ],
)
def test_malformed_response_becomes_fallback(response):
    client, completions = fake_client()
    completions.create = lambda **kwargs: response
    cfg = RecipeClient(client=client).generate("anything")
    assert cfg.name == "Fallback"


def test_background_generation_survives_malformed_response():
    client, completions = fake_client()
    completions.create = lambda **kwargs: SimpleNamespace(choices=[])
    engine = Engine(800, 600, rng=random.Random(0))
    thread = RecipeClient(client=client).generate_in_background("gold", engine.launch)
    thread.join(timeout=5)

    assert engine.pending_launches == 1
    engine.update()
    assert engine.rockets[0].config.name == "Fallback"


def test_fallback_matches_default_recipe_apart_from_color():
    cfg = fallback_config(random.Random(5))
    default = FireworkConfig()
    assert (cfg.particle_count, cfg.physics, cfg.shape) == (default.particle_count, default.physics, default.shape)


def test_missing_api_key_uses_fallback(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(recipe, "load_dotenv", lambda: False)
    client = RecipeClient()
    assert client.client is None
    assert client.generate("big boom").name == "Fallback"


def test_background_generation_feeds_launch_queue():
    client, _ = fake_client(json.dumps(FULL_PAYLOAD))
    engine = Engine(800, 600, rng=random.Random(0))
    thread = RecipeClient(client=client).generate_in_background("gold", engine.launch)
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert engine.pending_launches == 1
    engine.update()
    assert engine.rockets[0].config.shape is Shape.WILLOW
