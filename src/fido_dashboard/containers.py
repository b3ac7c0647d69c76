"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fido_dashboard.adapters.matplotlib_chart_renderer import MatplotlibChartRenderer
from fido_dashboard.adapters.reportlab_pdf_renderer import ReportlabPdfRenderer
from fido_dashboard.adapters.supabase_auth_client import SupabaseAuthClient
from fido_dashboard.adapters.supabase_feeding_repository import (
    SupabaseFeedingRepository,
)
from fido_dashboard.adapters.supabase_user_repository import SupabaseUserRepository
from fido_dashboard.config import Settings
from fido_dashboard.services.aggregation import get_category_profile
from fido_dashboard.services.diagnostics import DiagnosticsService
from fido_dashboard.services.feedings import FeedingService
from fido_dashboard.services.reports import ReportService
from fido_dashboard.services.stats import StatsService
from fido_dashboard.services.users import AccessService, UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    access_service: AccessService
    user_service: UserService
    feeding_service: FeedingService
    stats_service: StatsService
    report_service: ReportService
    diagnostics_service: DiagnosticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_client = SupabaseAuthClient(supabase_client)
    user_repository = SupabaseUserRepository(
        supabase_client, table=resolved_settings.users_collection
    )
    feeding_repository = SupabaseFeedingRepository(
        supabase_client, table=resolved_settings.feeding_collection
    )
    profile = get_category_profile(resolved_settings.category_profile)

    return AppContainer(
        settings=resolved_settings,
        access_service=AccessService(auth_client, user_repository),
        user_service=UserService(auth_client, user_repository),
        feeding_service=FeedingService(feeding_repository),
        stats_service=StatsService(
            repository=feeding_repository,
            profile=profile,
            collection=resolved_settings.feeding_collection,
        ),
        report_service=ReportService(
            chart_renderer=MatplotlibChartRenderer(),
            pdf_renderer=ReportlabPdfRenderer(),
        ),
        diagnostics_service=DiagnosticsService(
            feeding_repository, since=resolved_settings.diagnostics_since
        ),
    )
