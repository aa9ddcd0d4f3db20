import base64
import json

import pytest

BOB_UUID = "11111111-1111-1111-1111-111111111111"
SKIN_URL = "http://textures.minecraft.net/texture/4c2f6a6e1b0d1c8f3f1c2e0a9b8d7c6e5f4a3b2c1d0e9f8a7b6c5d4e3f2a1b0c"


def encode_texture(url: str | None = SKIN_URL, model: str | None = None) -> str:
    """Build a textureRaw payload the way the Mojang session server returns it."""
    skin: dict = {}
    if url is not None:
        skin["url"] = url
    if model is not None:
        skin["metadata"] = {"model": model}
    payload = {
        "timestamp": 1700000000000,
        "profileId": "0123456789abcdef0123456789abcdef",
        "profileName": "Notch",
        "signatureRequired": True,
        "textures": {"SKIN": skin},
    }
    return base64.b64encode(json.dumps(payload).encode()).decode()


@pytest.fixture
def bob_document() -> dict:
    """A parsed Citizens document with one plain NPC keyed "bob"."""
    return {
        "npc": {
            "bob": {
                "name": "&6Bob",
                "uuid": BOB_UUID,
                "traits": {
                    "location": {
                        "world": "world",
                        "x": 1.0,
                        "y": 64.0,
                        "z": 1.0,
                        "yaw": 0.0,
                        "pitch": 0.0,
                    },
                },
            },
        },
    }


@pytest.fixture
def citizens_saves() -> str:
    """A Citizens saves.yml with a skinned NPC, an unnamed NPC and a comment."""
    return f"""# Citizens NPC Storage
npc:
  '0':
    name: '&aGuard &lCaptain'
    uuid: 22222222-2222-2222-2222-222222222222
    traits:
      type: PLAYER
      owner:
        uuid: 33333333-3333-3333-3333-333333333333
      location:
        world: spawn
        x: 10.5
        y: 70.0
        z: -4.25
        yaw: 90.0
        pitch: 0.0
        bodyYaw: 90.0
      lookclose:
        enabled: true
        range: 5.0
      skintrait:
        textureRaw: {encode_texture(model="slim")}
        signature: c2lnbmF0dXJl
  '1':
    name: (&7Rechtsklick&)
    uuid: 44444444-4444-4444-4444-444444444444
    traits:
      type: VILLAGER
      location:
        world: spawn
        x: 0.0
        y: 64.0
        z: 0.0
        yaw: 0.0
        pitch: 0.0
"""
