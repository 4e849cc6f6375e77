"""
Command dispatcher for the generate commands.

Maps a command name and its typed options onto calls against a generator
backend, with uniform timing, progress and summary reporting. Each command
runs start -> validate -> generate -> report, synchronously.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from storegen.backend import GeneratorBackend
from storegen.config import Config
from storegen.exceptions import InvalidOptionError, StoregenError
from storegen.options import (
    CouponsOptions,
    CustomersOptions,
    OrdersOptions,
    ProductsOptions,
    TermsOptions,
)
from storegen.utils.logging_utils import log_error, log_line, log_success
from storegen.utils.progress import ProgressBar, make_progress_bar
from storegen.utils.timing import format_elapsed

COMMANDS = ("products", "orders", "customers", "coupons", "terms")

CommandOptions = Union[
    ProductsOptions, OrdersOptions, CustomersOptions, CouponsOptions, TermsOptions
]


@dataclass
class GenerationResult:
    entity: str
    count: int
    elapsed: float
    display_time: str
    success: bool = True
    error: Optional[str] = None

    @property
    def summary(self) -> str:
        return f"{self.count} {self.entity} generated in {self.display_time}"


class CommandDispatcher:
    """
    Runs generate commands against a backend.

    Args:
        backend: Collaborator that creates the store data.
        show_progress: Draw progress bars on the terminal.
        clock: Returns the current time in seconds; used for elapsed time.
        progress_factory: Builds the progress bar for each generation loop.
    """

    def __init__(
        self,
        backend: GeneratorBackend,
        show_progress: bool = True,
        clock: Callable[[], float] = time.time,
        progress_factory: Callable[..., ProgressBar] = make_progress_bar,
    ):
        self.backend = backend
        self.show_progress = show_progress
        self._clock = clock
        self._progress_factory = progress_factory
        self._progress: Optional[ProgressBar] = None

    def run(self, command: str, options: CommandOptions) -> GenerationResult:
        """
        Execute one generate command and report its outcome.

        Args:
            command: One of COMMANDS.
            options: Option set matching the command.

        Returns:
            GenerationResult: Count, timing and success flag. Failed commands
            carry the error message and print no success summary.
        """
        if command not in COMMANDS:
            raise ValueError(f"Unknown command: {command}")

        handler = getattr(self, command)
        section = f"Generating {command}"
        self._progress = None

        time_start = self._clock()
        try:
            count = handler(options)
        except StoregenError as e:
            time_end = self._clock()
            log_error(section, e)
            return GenerationResult(
                entity=command,
                count=self._progress.ticks if self._progress else 0,
                elapsed=time_end - time_start,
                display_time=format_elapsed(time_start, time_end),
                success=False,
                error=str(e),
            )
        time_end = self._clock()

        result = GenerationResult(
            entity=command,
            count=count,
            elapsed=time_end - time_start,
            display_time=format_elapsed(time_start, time_end),
        )
        log_success(result.summary)
        return result

    def products(self, options: ProductsOptions) -> int:
        log_line("Initializing...")
        if options.amount <= 0:
            return 0

        self.backend.seed_images(Config.image_pool_size(options.amount))
        return self._generate_items(
            "Generating products", options.amount, self.backend.generate_product
        )

    def orders(self, options: OrdersOptions) -> int:
        if options.status and not self.backend.is_order_status(options.status):
            raise InvalidOptionError(
                f'The argument "{options.status}" is not a valid order status.'
            )
        if options.amount <= 0:
            return 0

        self.backend.disable_order_emails()
        return self._generate_items(
            "Generating orders", options.amount, self.backend.generate_order, options
        )

    def customers(self, options: CustomersOptions) -> int:
        if options.amount <= 0:
            return 0

        self.backend.disable_customer_emails()
        return self._generate_items(
            "Generating customers", options.amount, self.backend.generate_customer
        )

    def coupons(self, options: CouponsOptions) -> int:
        if options.amount <= 0:
            return 0

        return self._generate_items(
            "Generating coupons",
            options.amount,
            self.backend.generate_coupon,
            options.min,
            options.max,
        )

    def terms(self, options: TermsOptions) -> int:
        """
        Generate taxonomy terms through a single batch call.

        The bar is ticked from the per-term callback handed to the backend, so
        it reflects terms actually created rather than the amount requested.
        """
        if options.taxonomy not in Config.TAXONOMIES:
            raise InvalidOptionError(
                f'Invalid taxonomy "{options.taxonomy}". '
                f"Expected one of: {', '.join(Config.TAXONOMIES)}"
            )
        if options.max_depth not in Config.MAX_DEPTH_CHOICES:
            raise InvalidOptionError(
                f"Invalid max_depth {options.max_depth}. "
                f"Expected a value from {Config.MAX_DEPTH_CHOICES[0]} "
                f"to {Config.MAX_DEPTH_CHOICES[-1]}"
            )
        if options.amount <= 0:
            return 0

        progress = self._start_progress("Generating terms", options.amount)
        try:
            term_ids = self.backend.batch_terms(
                options.amount,
                options.taxonomy,
                options,
                lambda term_id: progress.tick(),
            )
        finally:
            progress.finish()

        return len(term_ids)

    def _start_progress(self, message: str, total: int) -> ProgressBar:
        self._progress = self._progress_factory(
            message, total, enabled=self.show_progress
        )
        return self._progress

    def _generate_items(self, message: str, amount: int, generate, *args) -> int:
        progress = self._start_progress(message, amount)
        try:
            for _ in range(amount):
                generate(*args)
                progress.tick()
        finally:
            progress.finish()
        return amount
