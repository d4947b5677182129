"""Seed a synthetic analytics history for dashboard demos"""

import sys
import random
import argparse
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from app.database.json_store import JsonStore
from app.models.enums import Emotion, Situation, severity_of
from app.models.event import (
    EventLogDocument,
    SessionStartEvent,
    SessionStartMeta,
    SessionEndEvent,
    CheckoutClickedEvent,
    CheckoutStartedEvent,
    CheckoutSucceededEvent,
)
from app.services.event_service import EVENTS_FILE, now_ms

DAY_MS = 24 * 60 * 60 * 1000


def generate_events(users: int, days: int, seed: int):
    """Random sessions per user, drifting toward milder emotions over time"""
    rng = random.Random(seed)
    now = now_ms()
    emotions = sorted(Emotion, key=severity_of, reverse=True)
    situations = list(Situation)
    events = []

    for i in range(users):
        uid = f"seed-user-{i:05d}"
        first_day = rng.randint(0, days)
        for day in range(first_day, -1, -1):
            if rng.random() > 0.35:
                continue
            ts = now - day * DAY_MS - rng.randint(0, DAY_MS // 2)
            # Later sessions lean toward the low-severity end of the list
            drift = 1 - day / max(days, 1)
            emotion = emotions[min(len(emotions) - 1, int(rng.random() * len(emotions) * (0.5 + drift)))]
            events.append(SessionStartEvent(
                ts=ts,
                uid=uid,
                meta=SessionStartMeta(emotion=emotion, situation=rng.choice(situations))
            ))
            if rng.random() < 0.7:
                events.append(SessionEndEvent(ts=ts + rng.randint(60_000, 600_000), uid=uid))
            if rng.random() < 0.1:
                events.append(CheckoutClickedEvent(ts=ts + 1_000, uid=uid))
                events.append(CheckoutStartedEvent(ts=ts + 2_000, uid=uid))
                if rng.random() < 0.5:
                    events.append(CheckoutSucceededEvent(ts=ts + 90_000, uid=uid))

    events.sort(key=lambda e: e.ts)
    return events[-settings.EVENT_LOG_MAX_EVENTS:]


def seed_events():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--users", type=int, default=200)
    parser.add_argument("--days", type=int, default=21)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    print("\n" + "="*60)
    print("Seeding Sample Analytics Events")
    print("="*60)

    events = generate_events(args.users, args.days, args.seed)
    store = JsonStore(settings.DATA_DIR)
    store.save(EVENTS_FILE, EventLogDocument(events=events))

    print(f"   [OK] {len(events)} events written to {store.path_for(EVENTS_FILE)}")


if __name__ == "__main__":
    seed_events()
