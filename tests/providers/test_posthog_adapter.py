from unittest.mock import MagicMock, patch

from analytics_hub.page.document import Page
from analytics_hub.providers.posthog_adapter import PostHogAnalyticsAdapter


def _make_adapter(**options):
    """Create adapter with a mocked posthog.Client instance."""
    with patch("analytics_hub.providers.posthog_adapter.posthog_module") as mock_module:
        mock_client = MagicMock()
        mock_module.Client.return_value = mock_client
        adapter = PostHogAnalyticsAdapter(
            "PostHog",
            {**PostHogAnalyticsAdapter.defaults, "apiKey": "test-key", **options},
            Page("https://shop.example.com/landing"),
        )
        return adapter, mock_client, mock_module


class TestPostHogTrack:
    def test_calls_capture_with_event(self):
        adapter, mock_client, _ = _make_adapter()
        adapter.track("shop_viewed", {"shop_id": "s1"})

        mock_client.capture.assert_called_once_with(
            distinct_id="anonymous",
            event="shop_viewed",
            properties={"shop_id": "s1"},
        )

    def test_uses_last_identified_user(self):
        adapter, mock_client, _ = _make_adapter()
        adapter.identify("user-123", None)
        adapter.track("app_started", None)

        mock_client.capture.assert_called_once_with(
            distinct_id="user-123",
            event="app_started",
            properties=None,
        )


class TestPostHogIdentify:
    def test_calls_identify_with_user_id_and_traits(self):
        adapter, mock_client, _ = _make_adapter()
        adapter.identify("user-123", {"plan": "free"})

        mock_client.identify.assert_called_once_with(
            distinct_id="user-123",
            properties={"plan": "free"},
        )

    def test_anonymous_traits_use_configured_distinct_id(self):
        adapter, mock_client, _ = _make_adapter(distinctId="server")
        adapter.identify(None, {"plan": "free"})

        mock_client.identify.assert_called_once_with(
            distinct_id="server",
            properties={"plan": "free"},
        )


class TestPostHogPageview:
    def test_maps_to_pageview_event(self):
        adapter, mock_client, _ = _make_adapter()
        adapter.pageview("/shops/123")

        mock_client.capture.assert_called_once_with(
            distinct_id="anonymous",
            event="$pageview",
            properties={"$current_url": "/shops/123"},
        )

    def test_defaults_to_current_location(self):
        adapter, mock_client, _ = _make_adapter()
        adapter.pageview(None)

        assert mock_client.capture.call_args.kwargs["properties"] == {
            "$current_url": "https://shop.example.com/landing"
        }


class TestPostHogErrorHandling:
    def test_track_swallows_exceptions(self):
        adapter, mock_client, _ = _make_adapter()
        mock_client.capture.side_effect = Exception("Network error")
        # Should not raise
        adapter.track("test_event", None)

    def test_identify_swallows_exceptions(self):
        adapter, mock_client, _ = _make_adapter()
        mock_client.identify.side_effect = Exception("Network error")
        adapter.identify("user-1", None)

    def test_pageview_swallows_exceptions(self):
        adapter, mock_client, _ = _make_adapter()
        mock_client.capture.side_effect = Exception("Network error")
        adapter.pageview("/test")


class TestPostHogInit:
    def test_constructs_client_with_api_key_and_host(self):
        _, _, mock_module = _make_adapter(host="https://custom.posthog.com")

        mock_module.Client.assert_called_once_with(
            project_api_key="test-key",
            host="https://custom.posthog.com",
            debug=False,
            on_error=mock_module.Client.call_args.kwargs["on_error"],
        )

    def test_on_error_callback_is_set(self):
        _, _, mock_module = _make_adapter()
        assert callable(mock_module.Client.call_args.kwargs["on_error"])
