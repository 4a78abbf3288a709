"""
AIMCS Backend Capacity Load Tests

Exercises the read endpoints and the chat placeholder under load, plus the
CORS preflight path browsers hit before every cross-origin chat call.

Usage:
    # Web UI mode
    locust -f load_tests/locustfile.py --host=http://localhost:3000

    # Headless mode (100 users, 10 users/sec spawn rate, 5 min run)
    locust -f load_tests/locustfile.py --host=http://localhost:3000 \
        --headless -u 100 -r 10 -t 5m

    # Chat only
    locust -f load_tests/locustfile.py --host=http://localhost:3000 \
        --headless -u 50 -r 5 -t 2m --tags chat
"""

import random

from locust import HttpUser, between, events, tag, task
from locust.runners import MasterRunner, LocalRunner


class Config:
    ORIGIN = "https://aimcs.net"
    MODELS = ["gpt-4o-mini", "claude-3-haiku"]
    MESSAGES = [
        "hello",
        "What can you do?",
        "Summarise the last meeting",
        "Translate 'good morning' to Swedish",
    ]


class BrowsingUser(HttpUser):
    """User polling the catalog and health endpoints"""

    wait_time = between(1, 3)

    @tag("read", "health")
    @task(1)
    def health(self):
        with self.client.get("/health", name="Health", catch_response=True) as response:
            if response.status_code == 200 and response.json().get("status") == "OK":
                response.success()
            else:
                response.failure(f"Status {response.status_code}: {response.text}")

    @tag("read", "models")
    @task(3)
    def list_models(self):
        with self.client.get("/api/models", name="List Models", catch_response=True) as response:
            if response.status_code == 200 and response.json().get("models"):
                response.success()
            else:
                response.failure(f"Status {response.status_code}: {response.text}")


class ChatUser(HttpUser):
    """User sending chat messages from the frontend origin"""

    wait_time = between(0.5, 2)

    @tag("chat", "preflight")
    @task(1)
    def preflight(self):
        with self.client.options(
            "/api/chat",
            headers={
                "Origin": Config.ORIGIN,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
            name="Chat Preflight",
            catch_response=True
        ) as response:
            if response.status_code == 204 and response.headers.get("access-control-allow-origin") == Config.ORIGIN:
                response.success()
            else:
                response.failure(f"Preflight rejected: {response.status_code}")

    @tag("chat")
    @task(4)
    def send_message(self):
        payload = {
            "message": random.choice(Config.MESSAGES),
            "model": random.choice(Config.MODELS),
        }

        with self.client.post(
            "/api/chat",
            json=payload,
            headers={"Origin": Config.ORIGIN},
            name="Chat",
            catch_response=True
        ) as response:
            if response.status_code == 200 and response.json().get("model") == payload["model"]:
                response.success()
            else:
                response.failure(f"Status {response.status_code}: {response.text}")

    @tag("chat", "validation")
    @task(1)
    def send_empty_message(self):
        with self.client.post("/api/chat", json={}, name="Chat (invalid)", catch_response=True) as response:
            if response.status_code == 400:
                response.success()
            else:
                response.failure(f"Expected 400, got {response.status_code}")


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """Called when test starts."""
    if isinstance(environment.runner, (MasterRunner, LocalRunner)):
        print("=" * 60)
        print("AIMCS Backend Load Test Starting")
        print(f"Target host: {environment.host}")
        print("=" * 60)


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """Called when test stops."""
    if isinstance(environment.runner, (MasterRunner, LocalRunner)):
        print("=" * 60)
        print("Load Test Complete")
        print("=" * 60)
