#!/usr/bin/env python
"""
Interactive Tuition Console

Prompt-driven front end: add tutors and students, book lessons, then print a
student's lesson summary and a tutor's reviews.
Usage: python -m tuition.scripts.console [--demo]
"""
import argparse
from typing import Callable, Optional

from tuition.config import configure_logging, get_demo_settings
from tuition.exceptions import DuplicateTutorError, InvalidSubjectError
from tuition.models.student import Student
from tuition.models.subject import Subject, parse_subjects
from tuition.models.tutor import Tutor
from tuition.services.demo_data import DemoDataGenerator
from tuition.services.reporting import render_lesson_summary, render_tutor_reviews
from tuition.services.tuition_system import TuitionSystem


class TuitionConsole:
    """Text prompt adapter over a TuitionSystem"""

    def __init__(
        self,
        system: TuitionSystem,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.system = system
        self.input = input_fn or input
        self.output = output_fn or print

    def _section(self, title: str) -> None:
        self.output(title)
        self.output("-" * len(title))

    def prompt_int(self, prompt: str) -> int:
        """Prompt until the answer is a whole number"""
        while True:
            answer = self.input(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                self.output(f"'{answer}' is not a whole number, try again.")

    def add_tutors(self) -> None:
        self._section("Adding Tutors")
        for i in range(self.prompt_int("Enter the number of tutors: ")):
            self.output(f"Tutor {i + 1}")
            name = self.input("Enter tutor name: ")
            specialties_text = self.input("Enter specialties (comma-separated): ")
            try:
                specialties = parse_subjects(specialties_text)
            except InvalidSubjectError as e:
                self.output(f"{e}. Tutor not added!")
                self.output("")
                continue

            try:
                self.system.add_tutor(Tutor(name, specialties))
            except DuplicateTutorError as e:
                self.output(f"{e}. Tutor not added!")
                self.output("")
                continue

            self.output("Tutor added successfully!")
            self.output("")

    def add_students(self) -> None:
        self._section("Adding Students")
        for i in range(self.prompt_int("Enter the number of students: ")):
            self.output(f"Student {i + 1}")
            name = self.input("Enter student name: ")
            gender = self.input("Enter student gender: ")
            dob = self.input("Enter date of birth (YYYY-MM-DD): ").strip() or None
            contact = self.input("Enter emergency contact phone number: ")

            self.system.add_student(Student(name, gender, dob, contact))
            self.output("Student added successfully!")
            self.output("")

    def book_lessons(self) -> None:
        self._section("Booking Lessons")
        for i in range(self.prompt_int("Enter the number of lessons to book: ")):
            self.output(f"Lesson {i + 1}")
            student_name = self.input("Enter student name: ")
            subject_text = self.input("Enter subject: ")
            tutor_name = self.input("Enter tutor name: ")
            lesson_date = self.input("Enter date (YYYY-MM-DD): ").strip() or None
            hour = self.prompt_int("Enter hour (24-hour format): ")

            try:
                subject = Subject.parse(subject_text)
            except InvalidSubjectError as e:
                self.output(f"{e}. Lesson booking failed!")
                self.output("")
                continue

            student = self.system.find_student(student_name)
            tutor = self.system.get_tutor(tutor_name)

            if student is not None and tutor is not None:
                self.system.book_lesson(student, subject, tutor, lesson_date, hour)
                self.output("Lesson booked successfully!")
            else:
                self.output("Invalid student or tutor name. Lesson booking failed!")
            self.output("")

    def show_lesson_summary(self) -> None:
        self._section("Print Lesson Summary")
        student = self.system.find_student(self.input("Enter student name: "))
        if student is None:
            self.output("Invalid student name. Lesson summary cannot be printed!")
            return
        self.output(render_lesson_summary(student.name, self.system.lesson_summary(student)))

    def show_tutor_reviews(self) -> None:
        self._section("Print Tutor Reviews")
        tutor = self.system.get_tutor(self.input("Enter tutor name: "))
        if tutor is None:
            self.output("Invalid tutor name. Tutor reviews cannot be printed!")
            return
        self.output(render_tutor_reviews(tutor.name, self.system.tutor_reviews(tutor)))

    def run(self) -> None:
        self.add_tutors()
        self.add_students()
        self.book_lessons()
        self.show_lesson_summary()
        self.show_tutor_reviews()


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Interactive tuition booking console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with an empty system
  python -m tuition.scripts.console

  # Preload generated tutors, students and lessons
  python -m tuition.scripts.console --demo
        """
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Preload demo data from config/tuition_config.yaml",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config (default: TUITION_CONFIG_PATH)",
    )
    args = parser.parse_args(argv)

    configure_logging("WARNING")

    system = TuitionSystem()
    if args.demo:
        counts = DemoDataGenerator.from_settings(get_demo_settings(args.config)).populate(system)
        print(f"Loaded demo data: {counts['tutors']} tutors, {counts['students']} students")
        print("Tutors: " + ", ".join(t.name for t in system.get_tutors()))
        print("Students: " + ", ".join(s.name for s in system.get_students()))
        print()

    try:
        TuitionConsole(system).run()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting.")


if __name__ == "__main__":
    main()
