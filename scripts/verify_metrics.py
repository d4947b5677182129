"""Compute and print dashboard metrics from the configured data directory"""

import sys
import json
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from app.database.json_store import JsonStore
from app.services.event_service import list_events
from app.services.metrics_service import compute_dashboard_metrics, compute_burnout_metrics


def main():
    """Print both metric bundles; exit 1 on failure"""
    print("\n" + "="*60)
    print("Verifying Metrics")
    print("="*60)
    print(f"Data directory: {settings.DATA_DIR}")

    try:
        store = JsonStore(settings.DATA_DIR)
        events = list_events(store)
        print(f"Events loaded: {len(events)}")

        dashboard = compute_dashboard_metrics(events)
        print("\nDashboard Metrics:")
        print(json.dumps(dashboard.model_dump(by_alias=True), indent=2))

        burnout = compute_burnout_metrics(events)
        print("\nBurnout Metrics:")
        print(json.dumps(burnout.model_dump(by_alias=True), indent=2, ensure_ascii=False))

        print("\n[OK] Metrics computation successful.")
    except Exception as e:
        print(f"\n[FAIL] Error during metrics computation: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
