import os
import json
import requests

def notify(text: str) -> None:
    url = os.getenv("SLACK_WEBHOOK_URL")
    if not url:
        return

    resp = requests.post(
        url,
        data=json.dumps({"text": text}),
        headers={"Content-Type": "application/json"},
        timeout=10,
    )
    resp.raise_for_status()
