"""Smoke test: send one alert to the configured default webhook."""

from __future__ import annotations

import asyncio
import sys

from slack_alerts import DispatchResult, InMemoryJobQueue, SlackAlert


async def main() -> None:
    text = " ".join(sys.argv[1:]) or "Smoke test from slack-alerts"
    print("🚀 Starting Smoke Test: Slack alert")
    async with await SlackAlert.from_settings(queue=InMemoryJobQueue()) as alert:
        result = await alert.sync().with_icon_emoji(":white_check_mark:").message(text)
    if result is DispatchResult.NO_OP:
        print("⚠️  Alerts disabled or SLACK_ALERTS_WEBHOOK_URLS has no default URL. Nothing sent.")
    else:
        print("🏁 Alert delivered")


if __name__ == "__main__":
    asyncio.run(main())
