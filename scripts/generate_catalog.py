#!/usr/bin/env python3
"""
Generate a random course catalog JSON file for local load testing.
Output is accepted by scripts/load_catalog.py and by the API at startup (CATALOG_PATH).
  python scripts/generate_catalog.py --count 500 --out data/generated-courses.json
"""

import argparse
import json
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

TOPICS = {
    "Math": ["Math Explorers", "Math Wizards", "Fraction Frenzy", "Geometry Builders", "Number Ninjas"],
    "Science": ["Science Quest", "Young Astronomers", "Kitchen Chemistry", "Bug Detectives", "Robot Lab"],
    "English": ["Creative Writing Workshop", "Phonics Fun", "Book Club", "Poetry Corner", "Debate Starters"],
    "Technology": ["Intro to Python", "Scratch Game Makers", "Web Design Basics", "Minecraft Coding"],
    "Art": ["Watercolor Basics", "Clay Creations", "Comic Drawing", "Digital Art Studio"],
    "Music": ["Music Makers", "Piano Beginners", "Ukulele Jam", "Rhythm and Drums"],
}

TYPES = ["COURSE", "CLUB", "ONE_TIME"]

DESCRIPTIONS = [
    "Small groups, lots of hands-on practice and a friendly instructor.",
    "Weekly live sessions with take-home challenges.",
    "Project-based: every learner finishes with something to show.",
    "Builds confidence through games and short exercises.",
    "Great first step for curious beginners.",
]


def random_course(n: int, now: datetime) -> dict:
    category = random.choice(list(TOPICS))
    title = random.choice(TOPICS[category])
    if random.random() > 0.5:
        title += f" {random.choice(['Jr', 'Plus', 'Camp', 'Level 2'])}"
    min_age = random.randint(4, 14)
    max_age = min_age + random.randint(2, 5)
    return {
        "id": f"gen-{n:05d}",
        "title": title,
        "description": random.choice(DESCRIPTIONS),
        "category": category,
        "type": random.choice(TYPES),
        "gradeRange": f"ages {min_age}-{max_age}",
        "minAge": min_age,
        "maxAge": max_age,
        "price": random.choice([0.0, 25.0, 49.99, 75.0, 99.0, 120.0, 150.0, 199.0]),
        "nextSessionDate": (now + timedelta(days=random.randint(1, 90), hours=random.randint(8, 19)))
        .replace(minute=0, second=0, microsecond=0)
        .isoformat(),
    }


def main():
    ap = argparse.ArgumentParser(description="Write a random course catalog")
    ap.add_argument("--count", type=int, default=200, help="Number of courses")
    ap.add_argument("--out", default="data/generated-courses.json", help="Output file")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    args = ap.parse_args()

    if args.count < 1:
        print("--count must be at least 1")
        sys.exit(1)
    random.seed(args.seed)
    now = datetime.now(timezone.utc)
    courses = [random_course(i + 1, now) for i in range(args.count)]

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(courses, indent=2), encoding="utf-8")
    print(f"Wrote {len(courses)} courses to {out}")
    print(f"Load with: python scripts/load_catalog.py --catalog {out}")


if __name__ == "__main__":
    main()
