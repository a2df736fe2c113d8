"""
session.py - Teacher session context
Single responsibility: hold who is signed in for the lifetime of the window.
"""


def initials(name: str) -> str:
    return "".join(part[0] for part in name.split() if part).upper()


class SessionContext:
    def __init__(self):
        self.teacher_name: str = ""
        self.faculty_id: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.faculty_id)

    @property
    def display_name(self) -> str:
        return f"Dr. {self.teacher_name}"

    @property
    def initials(self) -> str:
        return initials(self.display_name)

    def start(self, teacher_name: str, faculty_id: str) -> None:
        self.teacher_name = teacher_name
        self.faculty_id = faculty_id

    def end(self) -> None:
        self.teacher_name = ""
        self.faculty_id = ""
