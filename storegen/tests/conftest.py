"""
Shared fixtures: a recording generator backend and dispatcher helpers.
"""

import sys
import types
from unittest.mock import MagicMock, patch

import pytest

from storegen.backend import GeneratorBackend
from storegen.dispatcher import CommandDispatcher
from storegen.exceptions import GeneratorError
from storegen.utils.progress import ProgressBar

BACKEND_MODULE = "storegen_test_backend"


class RecordingBackend(GeneratorBackend):
    """Backend double that records every call instead of creating data."""

    ORDER_STATUSES = {
        "pending",
        "processing",
        "on-hold",
        "completed",
        "cancelled",
        "refunded",
        "failed",
    }

    def __init__(self, term_error=None, terms_created=None, fail_on_order=None):
        self.calls = []
        self.term_error = term_error
        self.terms_created = terms_created
        self.fail_on_order = fail_on_order

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)

    def seed_images(self, count):
        self.calls.append(("seed_images", count))

    def generate_product(self):
        self.calls.append(("generate_product",))

    def disable_order_emails(self):
        self.calls.append(("disable_order_emails",))

    def is_order_status(self, status):
        self.calls.append(("is_order_status", status))
        return status in self.ORDER_STATUSES

    def generate_order(self, options):
        self.calls.append(("generate_order", options))
        if self.fail_on_order and self.count("generate_order") == self.fail_on_order:
            raise GeneratorError("Could not create order", code="order_failed")

    def disable_customer_emails(self):
        self.calls.append(("disable_customer_emails",))

    def generate_customer(self):
        self.calls.append(("generate_customer",))

    def generate_coupon(self, min_amount, max_amount):
        self.calls.append(("generate_coupon", min_amount, max_amount))

    def batch_terms(self, amount, taxonomy, options, on_term_generated):
        self.calls.append(("batch_terms", amount, taxonomy, options))
        if self.term_error:
            raise self.term_error
        created = amount if self.terms_created is None else self.terms_created
        term_ids = []
        for index in range(created):
            term_id = 100 + index
            term_ids.append(term_id)
            on_term_generated(term_id)
        return term_ids


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def backend_class():
    return RecordingBackend


@pytest.fixture
def bars():
    """Progress bars created by the dispatcher, in creation order."""
    return []


@pytest.fixture
def make_dispatcher(bars):
    """
    Build a dispatcher with hidden, recorded progress bars and a fake clock.

    ``elapsed`` is the number of seconds between the start and end reads.
    """

    def factory(message, total, enabled=True):
        bar = ProgressBar(message, total, enabled=False)
        bars.append(bar)
        return bar

    def _make(backend, elapsed=1.5):
        clock = MagicMock(side_effect=[1000.0, 1000.0 + elapsed])
        return CommandDispatcher(
            backend, show_progress=False, clock=clock, progress_factory=factory
        )

    return _make


@pytest.fixture
def backend_module(backend):
    """Expose ``backend`` as ``storegen_test_backend:backend`` for import-path loading."""
    module = types.ModuleType(BACKEND_MODULE)
    module.backend = backend
    module.RecordingBackend = RecordingBackend
    module.make_backend = lambda: backend
    module.not_a_backend = object()
    with patch.dict(sys.modules, {BACKEND_MODULE: module}):
        yield module
