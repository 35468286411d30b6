"""Test settings must be in the environment before nonprofit.core.config is imported."""

import os
import tempfile

os.environ["APP_ENV"] = "dev"
os.environ.setdefault("JWT_SECRET", "test-secret-that-is-long-enough-for-hs256-keys")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="nonprofit-test-uploads-"))
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_placeholder")
