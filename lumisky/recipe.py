"""
AI firework recipes.

Turns a free-text description ("slow falling gold rain") into a FireworkConfig
via an OpenAI chat completion in JSON mode. Every failure - missing API key,
API/network error, malformed or partial JSON - is absorbed here: callers always
receive a complete, valid config, falling back to a plain random-colored sphere.
"""
import json
import logging
import math
import os
import random
import threading
from dataclasses import replace
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv
from openai import OpenAI, OpenAIError

from . import config as C
from .colors import random_hex
from .models import FireworkConfig, PhysicsConfig, Shape
from .presets import DEFAULT_CONFIG, DEFAULT_PHYSICS

logger = logging.getLogger("lumisky")

SYSTEM_PROMPT = (
    "You are a master pyrotechnician. Create visually stunning firework parameters "
    "based on user descriptions. Reply with a single JSON object with these keys:\n"
    "- colors: array of hex color strings (e.g. '#FF0000') that match the description\n"
    "- particleCount: number of particles (50-300); more for complex, fewer for simple\n"
    "- shape: one of 'sphere', 'heart', 'star', 'willow', 'ring'\n"
    "- friction: air resistance (0.90-0.99); higher = slower spread, good for willow\n"
    "- gravity: gravity effect (0.01-0.1); lower for a floaty feel\n"
    "- decay: fade-out speed (0.005-0.03); lower = longer lasting trails\n"
    "- initialVelocity: explosion force (3-15)"
)

USER_TEMPLATE = (
    'Design a firework configuration based on this description: "{prompt}". '
    "Translate the artistic description into physics parameters. "
    "For example, 'slow falling gold' implies low gravity and low decay. "
    "'Big boom' implies high initialVelocity."
)

# payload key -> (PhysicsConfig field, lower bound, upper bound)
PHYSICS_FIELDS = {
    "friction": ("friction", 0.5, 0.99),
    "gravity": ("gravity", 0.0, 0.5),
    "decay": ("decay", 0.001, 0.2),
    "initialVelocity": ("initial_velocity", 0.0, 30.0),
}


class RecipeError(ValueError):
    """The model's answer could not be turned into a firework config."""


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value == 0:
        # zero means "unset" in model answers, same as missing
        return None
    return float(value)


def config_from_payload(data: Dict[str, Any], name: Optional[str] = None) -> FireworkConfig:
    """Map the flat JSON answer onto a FireworkConfig, defaulting and clamping every field."""
    if not isinstance(data, dict):
        raise RecipeError(f"expected a JSON object, got {type(data).__name__}")

    colors = data.get("colors")
    if isinstance(colors, str):
        colors = [colors]
    if not isinstance(colors, list):
        colors = []
    colors = [c for c in colors if isinstance(c, str) and c.strip()]
    if not colors:
        colors = ["#ffffff"]

    count = _number(data.get("particleCount"))
    if count is None:
        count = C.DEFAULT_PARTICLE_COUNT
    count = int(max(C.MIN_PARTICLE_COUNT, min(C.MAX_PARTICLE_COUNT, round(count))))

    try:
        shape = Shape(str(data.get("shape", Shape.SPHERE.value)).lower())
    except ValueError:
        logger.debug(f"Unknown shape {data.get('shape')!r}, using sphere")
        shape = Shape.SPHERE

    physics = {}
    for key, (field_name, lo, hi) in PHYSICS_FIELDS.items():
        value = _number(data.get(key))
        if value is None:
            value = getattr(DEFAULT_PHYSICS, field_name)
        physics[field_name] = max(lo, min(hi, value))

    return FireworkConfig(
        colors=tuple(colors),
        particle_count=count,
        physics=PhysicsConfig(**physics),
        shape=shape,
        name=name,
    )


def fallback_config(rng: random.Random | None = None) -> FireworkConfig:
    """The safe recipe used whenever generation fails: one random color, plain sphere."""
    return replace(DEFAULT_CONFIG, colors=(random_hex(rng),), name="Fallback")


class RecipeClient:
    """Handles OpenAI client setup and recipe generation."""

    def __init__(self, client: Optional[OpenAI] = None, model: str = C.RECIPE_MODEL, temperature: float = C.RECIPE_TEMPERATURE):
        if client is None:
            load_dotenv()
            if os.getenv("OPENAI_API_KEY"):
                client = OpenAI()
            else:
                logger.warning("OPENAI_API_KEY is not set; AI recipes will use the fallback firework")
        self.client = client
        self.model = model
        self.temperature = temperature

    def generate(self, prompt: str) -> FireworkConfig:
        """Never raises: returns the generated config or ``fallback_config()``."""
        if self.client is None:
            return fallback_config()

        logger.info(f"Requesting recipe (model: {self.model}) for {prompt!r}")
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": USER_TEMPLATE.format(prompt=prompt)},
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature,
            )
            content = response.choices[0].message.content or "{}"
            config = config_from_payload(json.loads(content), name=prompt[:40])
        except OpenAIError as e:
            logger.error(f"OpenAI API error while generating recipe: {type(e).__name__} - {e}")
            return fallback_config()
        except (json.JSONDecodeError, RecipeError, ValueError, IndexError, AttributeError, TypeError) as e:
            logger.error(f"Unusable recipe answer for {prompt!r}: {e}")
            return fallback_config()

        logger.info(f"Recipe ready: {config.shape.value}, {config.particle_count} particles, colors={list(config.colors)}")
        return config

    def generate_in_background(self, prompt: str, on_ready: Callable[[FireworkConfig], None]) -> threading.Thread:
        """Run generate() on a daemon thread and hand the result to ``on_ready`` (e.g. engine.launch)."""
        thread = threading.Thread(
            target=lambda: on_ready(self.generate(prompt)),
            name="recipe",
            daemon=True,
        )
        thread.start()
        return thread
