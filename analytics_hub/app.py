import sentry_sdk
import structlog
from apscheduler.schedulers.background import BackgroundScheduler

from analytics_hub.core.config import Settings, settings
from analytics_hub.core.dispatcher import Analytics
from analytics_hub.core.registry import Registry
from analytics_hub.page.document import Page
from analytics_hub.providers import default_registry

logger = structlog.get_logger()


def _init_sentry(config: Settings | None = None) -> None:
    """Initialize Sentry error tracking if DSN is configured."""
    config = config or settings
    if not config.sentry_dsn:
        return
    sentry_sdk.init(
        dsn=config.sentry_dsn,
        environment=config.environment,
        traces_sample_rate=0.1,
        send_default_pii=False,
    )
    logger.info("Sentry initialized", environment=config.environment)


def create_analytics(
    registry: Registry | None = None,
    page: Page | None = None,
    scheduler: BackgroundScheduler | None = None,
    config: Settings | None = None,
) -> Analytics:
    """Build an ``Analytics`` dispatcher from settings.

    Providers listed in ``ANALYTICS_PROVIDERS`` are enabled right away;
    otherwise the caller is expected to call ``initialize`` itself.
    """
    config = config or settings
    _init_sentry(config)

    analytics = Analytics(
        registry=registry or default_registry(),
        page=page or Page(config.page_url),
        scheduler=scheduler,
        timeout_ms=config.callback_timeout_ms,
    )
    if config.providers:
        analytics.initialize(config.providers)
    return analytics
