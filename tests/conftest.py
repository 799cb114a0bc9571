"""Configuração do pytest para o projeto Vibra backend."""

import copy
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

CONVERSATION_PAYLOAD = {
    "conversation": {
        "cast": {
            "hash": "0xbd78ba95ff14557be0a50746432df3cac0788758",
            "text": "live now",
            "timestamp": "2024-08-01T18:00:00.000Z",
            "author": {
                "fid": 16098,
                "username": "jpfraneto",
                "display_name": "jp",
                "pfp_url": "https://example.com/jp.png",
                "follower_count": 4200,
            },
            "embeds": [{"url": "https://www.youtube.com/watch?v=dZsIQV-B9Us"}],
            "reactions": {"likes_count": 12, "recasts_count": 3},
            "replies": {"count": 2},
            "channel": {
                "id": "vibra",
                "name": "Vibra",
                "image_url": "https://example.com/vibra.png",
            },
            "direct_replies": [
                {
                    "hash": "0xreply1",
                    "text": "gm",
                    "timestamp": "2024-08-01T18:01:00.000Z",
                    "author": {
                        "fid": 1,
                        "username": "alice",
                        "display_name": "Alice",
                        "pfp_url": "https://example.com/alice.png",
                    },
                    "reactions": {"likes_count": 1, "recasts_count": 0},
                },
                {
                    "hash": "0xreply2",
                    "text": "great stream",
                    "timestamp": "2024-08-01T18:02:00.000Z",
                    "author": {
                        "fid": 2,
                        "username": "bob",
                        "display_name": "Bob",
                        "pfp_url": "https://example.com/bob.png",
                    },
                    "reactions": {"likes_count": 0, "recasts_count": 1},
                },
            ],
        }
    }
}


@pytest.fixture
def conversation_payload() -> dict:
    """Resposta completa de /cast/conversation (cópia mutável)."""
    return copy.deepcopy(CONVERSATION_PAYLOAD)
