from venue_dashboard.routers.members import _member_lookup_service


def test_members_router_targets_configured_webhook(monkeypatch):
    monkeypatch.setattr(
        "venue_dashboard.routers.members.settings.membership_webhook_url",
        "http://n8n.internal/webhook/Membership-Info",
    )
    monkeypatch.setattr("venue_dashboard.routers.members.settings.membership_timeout_seconds", 1.5)

    service = _member_lookup_service()

    assert service._membership_client._webhook_url == "http://n8n.internal/webhook/Membership-Info"
    assert service._membership_client._timeout == 1.5
