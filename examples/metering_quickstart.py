"""
Demo: Metering Quickstart

This example creates a COUNT meter, ingests one event for it, queries the
aggregated value and cleans up.

Requirements:
- Meterus server reachable at METERUS_ADDR (default localhost:8000)
- METERUS_API_KEY set to a key with the meterus:meterus scope

Usage:
    python examples/metering_quickstart.py
"""

import time
import uuid
from datetime import datetime, timedelta, timezone

from meterus.config.settings import load_config
from meterus.logging_config import get_logger
from meterus.sdk import MeterusClient, new_cloud_event

logger = get_logger(__name__)


def main():
    """Run the metering quickstart."""

    config = load_config()

    with MeterusClient.from_config(config, configure_logging=True) as client:
        metering = client.new_metering_service()

        meter = metering.create_meter(
            slug=f"quickstart_{uuid.uuid4().hex[:8]}",
            event_type="quickstart.event",
            aggregation="count",
            group_by=["user_id"],
            description="Quickstart demo meter",
            created_by="quickstart",
        )
        logger.info("meter_created", meter_id=meter.id, slug=meter.slug)

        try:
            metering.ingest(new_cloud_event(
                str(uuid.uuid4()), "quickstart", "1.0", meter.event_type, None, "demo-subject",
                {"user_id": "demo-user", "action": "login"},
            ))

            # Give the server time to aggregate
            time.sleep(2)

            now = datetime.now(timezone.utc)
            for value in metering.query_meter(meter.id, now - timedelta(hours=1), now):
                logger.info(
                    "meter_value",
                    subject=value.subject,
                    group_by=dict(value.group_by),
                    value=value.value,
                )
        finally:
            metering.delete_meter(meter.id)
            logger.info("meter_deleted", meter_id=meter.id)


if __name__ == "__main__":
    main()
