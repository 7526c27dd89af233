# Rows are read-only snapshots of the remote sheets taken at request time.
# Nothing here is persisted; the browser keeps the validated user in memory.
from dataclasses import dataclass
from typing import Dict

# Sheet column headers
ID_COLUMN = 'ID'
PHONE_COLUMN = 'Phone'
NAME_COLUMN = 'Name'

STUDENT_ID_COLUMN = 'Student ID'
EXAM_NUMBER_COLUMN = 'Exam Number'
DAY_COLUMN = 'Day'
CENTER_COLUMN = 'Educational Center'
GRADE_COLUMN = 'Exam Grade'
HOMEWORK_COLUMN = 'Homework Status'


@dataclass(frozen=True)
class StudentUser:
    id: str
    name: str
    phone: str

    @classmethod
    def from_row(cls, row: Dict) -> 'StudentUser':
        return cls(
            id=str(row.get(ID_COLUMN) or ''),
            name=str(row.get(NAME_COLUMN) or ''),
            phone=str(row.get(PHONE_COLUMN) or '')
        )

    def to_dict(self) -> Dict:
        return {'id': self.id, 'name': self.name, 'phone': self.phone}


@dataclass(frozen=True)
class ExamRecord:
    number: int
    exam_number: str
    day: str
    educational_center: str
    exam_grade: str
    homework_status: str

    @classmethod
    def from_row(cls, number: int, row: Dict) -> 'ExamRecord':
        return cls(
            number=number,
            exam_number=str(row.get(EXAM_NUMBER_COLUMN) or ''),
            day=str(row.get(DAY_COLUMN) or ''),
            educational_center=str(row.get(CENTER_COLUMN) or ''),
            exam_grade=str(row.get(GRADE_COLUMN) or ''),
            homework_status=str(row.get(HOMEWORK_COLUMN) or '')
        )

    def to_dict(self) -> Dict:
        return {
            'number': self.number,
            'examNumber': self.exam_number,
            'day': self.day,
            'educationalCenter': self.educational_center,
            'examGrade': self.exam_grade,
            'homeworkStatus': self.homework_status
        }
