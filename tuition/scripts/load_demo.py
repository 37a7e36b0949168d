"""
Demo Scenario Loader

Builds a tuition system from generated demo data and prints every student's
lesson summary and every tutor's reviews.
Usage: python -m tuition.scripts.load_demo [--students 10] [--seed 7]
"""
import argparse
import logging
from typing import Optional, TextIO

from tuition.config import configure_logging, get_demo_settings
from tuition.services.demo_data import DemoDataGenerator
from tuition.services.tuition_system import TuitionSystem

logger = logging.getLogger(__name__)


def build_demo_system(settings: dict) -> TuitionSystem:
    system = TuitionSystem()
    DemoDataGenerator.from_settings(settings).populate(system)
    return system


def print_reports(system: TuitionSystem, file: Optional[TextIO] = None) -> None:
    """Print every student's summary followed by every tutor's reviews"""
    for student in system.get_students():
        system.print_lesson_summary(student, file=file)
    for tutor in system.get_tutors():
        system.print_tutor_reviews(tutor, file=file)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load demo tuition data and print reports")
    parser.add_argument("--config", help="Path to YAML config (default: TUITION_CONFIG_PATH)")
    parser.add_argument("--tutors", type=int, help="Number of tutors to generate")
    parser.add_argument("--students", type=int, help="Number of students to generate")
    parser.add_argument("--lessons", type=int, help="Lessons booked per student")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible data")
    args = parser.parse_args(argv)

    configure_logging()

    # CLI args override config
    settings = get_demo_settings(args.config)
    overrides = {
        "num_tutors": args.tutors,
        "num_students": args.students,
        "lessons_per_student": args.lessons,
        "seed": args.seed,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})

    logger.info(f"Loading demo data with settings: {settings}")
    print_reports(build_demo_system(settings))


if __name__ == "__main__":
    main()
