"""
Generator backend interface and loader.

The generate commands never create store data themselves; they call into a
backend object supplied by the host project. A backend subclasses
``GeneratorBackend`` and is located through an import path of the form
``package.module:attribute``.
"""

import importlib
from abc import ABC, abstractmethod
from typing import Any, Callable, List

from storegen.exceptions import BackendLoadError
from storegen.options import OrdersOptions, TermsOptions

TermCallback = Callable[[int], None]


class GeneratorBackend(ABC):
    """
    Collaborator that performs the actual data generation.

    Single-item methods create and persist one entity per call and raise
    ``GeneratorError`` on failure.
    """

    @abstractmethod
    def seed_images(self, count: int) -> None:
        """Pre-generate a shared pool of ``count`` product images."""

    @abstractmethod
    def generate_product(self) -> Any:
        """Create one product."""

    @abstractmethod
    def disable_order_emails(self) -> None:
        """Suppress outbound notifications triggered by order creation."""

    @abstractmethod
    def is_order_status(self, status: str) -> bool:
        """Return True if ``status`` is a recognized order status identifier."""

    @abstractmethod
    def generate_order(self, options: OrdersOptions) -> Any:
        """Create one order, honouring status, date range and coupon options."""

    @abstractmethod
    def disable_customer_emails(self) -> None:
        """Suppress outbound notifications triggered by customer creation."""

    @abstractmethod
    def generate_customer(self) -> Any:
        """Create one customer."""

    @abstractmethod
    def generate_coupon(self, min_amount: int, max_amount: int) -> Any:
        """Create one coupon with a discount between ``min_amount`` and ``max_amount``."""

    @abstractmethod
    def batch_terms(
        self,
        amount: int,
        taxonomy: str,
        options: TermsOptions,
        on_term_generated: TermCallback,
    ) -> List[int]:
        """
        Create up to ``amount`` terms in ``taxonomy`` in one call.

        Args:
            amount: Number of terms requested.
            taxonomy: Taxonomy slug ("product_cat" or "product_tag").
            options: Depth and parent constraints.
            on_term_generated: Called with each new term id as soon as it exists.

        Returns:
            List[int]: Ids of the created terms.

        Raises:
            GeneratorError: If the batch could not be generated.
        """


def load_backend(path: str) -> GeneratorBackend:
    """
    Resolve a backend from an import path.

    The attribute may be a ``GeneratorBackend`` instance, a subclass (created
    with no arguments) or a zero-argument factory returning an instance.

    Args:
        path: Import path in ``package.module:attribute`` form.

    Returns:
        GeneratorBackend: Ready-to-use backend instance.

    Raises:
        BackendLoadError: If the path is malformed, the module or attribute
            does not exist, or the result is not a GeneratorBackend.
    """
    module_name, sep, attr_name = (path or "").partition(":")
    if not sep or not module_name or not attr_name:
        raise BackendLoadError(
            f"Invalid backend path {path!r}. Expected 'package.module:attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise BackendLoadError(f"Could not import backend module {module_name!r}: {e}")

    try:
        target = getattr(module, attr_name)
    except AttributeError:
        raise BackendLoadError(
            f"Backend module {module_name!r} has no attribute {attr_name!r}"
        )

    if isinstance(target, GeneratorBackend):
        return target

    if callable(target):
        backend = target()
        if isinstance(backend, GeneratorBackend):
            return backend

    raise BackendLoadError(f"{path} did not produce a GeneratorBackend")
