#!/usr/bin/env python3
"""
Create sample workbooks for the Student Records Portal.

Writes database.xlsx (ID, Phone, Name) and records.xlsx (one row per exam)
into the given folder. Serve the folder over HTTP, for example with
`python -m http.server 8000`, and point DATABASE_SHEET_URL and
RECORDS_SHEET_URL at the two files.
"""
import os
import random
import argparse

import pandas as pd
from faker import Faker

CENTERS = ['Nasr City Center', 'Maadi Center', 'Heliopolis Center', 'Dokki Center']
DAYS = ['Saturday', 'Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday']
HOMEWORK_STATUSES = ['Done', 'Incomplete', 'Not Submitted']


def create_student_data(count=30, seed=None):
    """Create the credential rows used to log in."""
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)
    fake = Faker('en_US')

    students = []
    for i in range(count):
        students.append({
            'ID': str(1001 + i),
            # Phone numbers are stored with the country prefix, as the form sends them
            'Phone': '201' + random.choice('0125') + fake.numerify('########'),
            'Name': fake.name()
        })
    return pd.DataFrame(students)


def create_records_data(students: pd.DataFrame, max_exams=8):
    """Create exam rows for each student, shuffled so the sheet is unordered."""
    records = []
    for _, student in students.iterrows():
        center = random.choice(CENTERS)
        for exam_number in range(1, random.randint(1, max_exams) + 1):
            records.append({
                'Student ID': student['ID'],
                'Exam Number': exam_number,
                'Day': random.choice(DAYS),
                'Educational Center': center,
                'Exam Grade': f"{random.randint(5, 20)}/20",
                'Homework Status': random.choice(HOMEWORK_STATUSES)
            })

    df = pd.DataFrame(records)
    return df.sample(frac=1).reset_index(drop=True)


def main():
    parser = argparse.ArgumentParser(description='Create sample portal workbooks')
    parser.add_argument('--output', default='sample_data', help='folder for the workbooks')
    parser.add_argument('--students', type=int, default=30)
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args()

    os.makedirs(args.output, exist_ok=True)
    students = create_student_data(args.students, args.seed)
    records = create_records_data(students)

    database_file = os.path.join(args.output, 'database.xlsx')
    records_file = os.path.join(args.output, 'records.xlsx')
    students.to_excel(database_file, index=False, engine='openpyxl')
    records.to_excel(records_file, index=False, engine='openpyxl')

    print(f"Database sheet: {database_file} ({len(students)} students)")
    print(f"Records sheet: {records_file} ({len(records)} exam rows)")
    print(f"Try logging in with ID {students.iloc[0]['ID']} and phone {students.iloc[0]['Phone']}")


if __name__ == '__main__':
    main()
