"""
Shared constants and builders for the food info endpoint tests.
"""

from typing import Any, Dict, List, Optional

from base.models import AgentResponse

AGENT_ID = "foodInfoAgent"

APPLE_NUTRIENTS = [
    {"nutrientName": "Protein", "value": 0.26, "unitName": "G"},
    {"nutrientName": "Total lipid (fat)", "value": 0.17, "unitName": "G"},
    {"nutrientName": "Carbohydrate, by difference", "value": 13.8, "unitName": "G"},
    {"nutrientName": "Energy", "value": 52.0, "unitName": "KCAL"},
    {"nutrientName": "Calcium, Ca", "value": 6.0, "unitName": "MG"},
    {"nutrientName": "Potassium, K", "value": 107.0, "unitName": "MG"},
    {"nutrientName": "Vitamin C, total ascorbic acid", "value": 4.6, "unitName": "MG"},
]


def search_payload(nutrients: List[Dict[str, Any]], description: str = "Apples, raw") -> Dict[str, Any]:
    return {
        "totalHits": 1,
        "foods": [{"description": description, "fdcId": 171688, "foodNutrients": nutrients}],
    }


def jsonrpc_request(text: Optional[str] = "apple", **params) -> Dict[str, Any]:
    if text is not None and "message" not in params and "messages" not in params:
        params["message"] = {
            "role": "user",
            "parts": [{"kind": "text", "text": text}],
            "messageId": "msg-1",
        }
    return {"jsonrpc": "2.0", "id": "req-1", "method": "message/send", "params": params}


class StaticAgent:
    """Agent stub that ignores the capability and returns a fixed text."""

    def __init__(self, text: Any):
        self.text = text
        self.calls = []

    async def generate(self, messages, fetch_capability):
        self.calls.append(messages)
        return AgentResponse(text=self.text)
