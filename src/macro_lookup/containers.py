"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from macro_lookup.adapters.fdc_client import FdcClient, HttpxFdcClient
from macro_lookup.config import Settings, load_settings, require_api_key
from macro_lookup.services.mass import MassResolver
from macro_lookup.services.nutrition import NutritionService
from macro_lookup.services.report import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    fdc_client: FdcClient
    nutrition_service: NutritionService
    report_service: ReportService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, fdc_client: FdcClient | None = None
) -> AppContainer:
    """Create the default dependency container.

    Raises UsageError when no API key is configured.
    """
    resolved_settings = settings or load_settings()
    api_key = require_api_key(resolved_settings)
    httpx_client: HttpxFdcClient | None = None
    if fdc_client is None:
        httpx_client = HttpxFdcClient.create(
            api_key=api_key,
            base_url=resolved_settings.fdc_base_url,
            timeout=resolved_settings.request_timeout_seconds,
        )
        fdc_client = httpx_client
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        data_types=resolved_settings.fdc_data_types or None,
    )
    mass_resolver = MassResolver(
        portion_source=nutrition_service,
        unknown_unit_policy=resolved_settings.unknown_unit_policy,
        default_grams_per_unit=resolved_settings.default_grams_per_unit,
    )
    report_service = ReportService(
        nutrition_service=nutrition_service,
        mass_resolver=mass_resolver,
        bare_item_default=resolved_settings.bare_item_default,
    )

    async def close_resources() -> None:
        if httpx_client is not None:
            await httpx_client.close()

    return AppContainer(
        settings=resolved_settings,
        fdc_client=fdc_client,
        nutrition_service=nutrition_service,
        report_service=report_service,
        close_resources=close_resources,
    )
