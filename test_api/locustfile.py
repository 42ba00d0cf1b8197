"""
Locust Load Testing for the User Auth API

Simulates users registering, logging in and fetching their profile.

Usage:
    locust -f test_api/locustfile.py --host=http://127.0.0.1:8005

    Or run headless:
    locust -f test_api/locustfile.py --host=http://127.0.0.1:8005 --headless -u 100 -r 10 -t 5m
"""

from locust import HttpUser, task, between, events
from locust.runners import MasterRunner
import random
import string
import time
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def generate_random_email():
    """Generate a random email for testing."""
    random_str = ''.join(random.choices(string.ascii_lowercase, k=8))
    return f"locust_{random_str}_{int(time.time()*1000)}@example.com"


def generate_random_password():
    """Generate a random password."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=10))


class AuthenticationUser(HttpUser):
    """
    Registers once on start, then mixes logins and profile lookups.
    """

    wait_time = between(1, 5)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_email = None
        self.user_password = None
        self.token = None

    def on_start(self):
        """Called when a new user starts."""
        self.user_email = generate_random_email()
        self.user_password = generate_random_password()
        with self.client.post(
            "/api/auth/register",
            json={"name": "Locust Test", "email": self.user_email, "password": self.user_password},
            name="Register",
            catch_response=True
        ) as response:
            if response.status_code == 201:
                self.token = response.json().get("token")
                response.success()
            else:
                response.failure(f"Register failed: {response.status_code}")

    @task(10)
    def health_check(self):
        with self.client.get("/", name="Health Check", catch_response=True) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Health check failed: {response.status_code}")

    @task(5)
    def login_with_credentials(self):
        with self.client.post(
            "/api/auth/login",
            json={"email": self.user_email, "password": self.user_password},
            name="Login",
            catch_response=True
        ) as response:
            if response.status_code == 200:
                self.token = response.json().get("token")
                response.success()
            else:
                response.failure(f"Login failed: {response.status_code}")

    @task(8)
    def fetch_profile(self):
        if not self.token:
            return
        with self.client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {self.token}"},
            name="Me",
            catch_response=True
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Profile lookup failed: {response.status_code}")

    @task(1)
    def register_duplicate(self):
        """A repeat registration must be refused with 409."""
        with self.client.post(
            "/api/auth/register",
            json={"name": "Locust Test", "email": self.user_email.upper(), "password": self.user_password},
            name="Register (duplicate)",
            catch_response=True
        ) as response:
            if response.status_code == 409:
                response.success()
            else:
                response.failure(f"Duplicate register returned {response.status_code}")


class HeavyLoginUser(HttpUser):
    """
    Hammers login with unknown credentials; every answer should be 401.
    """

    wait_time = between(0.5, 2)

    @task
    def continuous_login(self):
        with self.client.post(
            "/api/auth/login",
            json={"email": generate_random_email(), "password": generate_random_password()},
            name="Heavy Login",
            catch_response=True
        ) as response:
            if response.status_code == 401:
                response.success()
            else:
                response.failure(f"Unexpected login status: {response.status_code}")


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    logger.info("="*60)
    logger.info("LOAD TEST STARTED")
    logger.info("="*60)
    if isinstance(environment.runner, MasterRunner):
        logger.info(f"Running as master with {environment.runner.worker_count} workers")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    logger.info("="*60)
    logger.info("LOAD TEST COMPLETED")
    logger.info("="*60)


@events.request.add_listener
def on_request(request_type, name, response_time, response_length, response, exception=None, **kwargs):
    if exception:
        logger.error(f"Request failed: {name} - {exception}")
    elif response_time > 5000:  # Log slow requests (>5 seconds)
        logger.warning(f"Slow request: {name} took {response_time}ms")
