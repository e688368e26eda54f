"""Fixture data for the demo pages."""

PROJECTS: list[dict[str, object]] = [
    {"id": "PRJ-001", "name": "Website Redesign", "manager": "Bhuvi", "status": "In Progress",
     "deadline": "2025-03-15", "budget": 75000, "priority": "High"},
    {"id": "PRJ-002", "name": "Mobile App Development", "manager": "Dhoni", "status": "Planning",
     "deadline": "2025-05-01", "budget": 120000, "priority": "Medium"},
    {"id": "PRJ-003", "name": "Database Migration", "manager": "Kohli", "status": "Completed",
     "deadline": "2025-02-10", "budget": 45000, "priority": "High"},
    {"id": "PRJ-004", "name": "Security Audit", "manager": "David Miller", "status": "On Hold",
     "deadline": "2025-04-20", "budget": 35000, "priority": "Low"},
    {"id": "PRJ-005", "name": "Cloud Infrastructure Setup", "manager": "Suryakumar",
     "status": "In Progress", "deadline": "2025-03-30", "budget": 90000, "priority": "Critical"},
    {"id": "PRJ-006", "name": "User Experience Research", "manager": "Bhuvi", "status": "Planning",
     "deadline": "2025-04-15", "budget": 28000, "priority": "Medium"},
    {"id": "PRJ-007", "name": "Payment Gateway Integration", "manager": "Kohli",
     "status": "In Progress", "deadline": "2025-03-25", "budget": 55000, "priority": "High"},
    {"id": "PRJ-008", "name": "Content Management System", "manager": "Rohit", "status": "Completed",
     "deadline": "2025-02-05", "budget": 42000, "priority": "Medium"},
]

TEAM: list[dict[str, object]] = [
    {"id": 1, "name": "David Warner", "role": "Developer", "department": "Engineering",
     "contact": "david@example.com", "yearsOfService": 3, "skillLevel": 4, "location": "Sydney"},
    {"id": 2, "name": "Adam Gilchrist", "role": "Designer", "department": "Creative",
     "contact": "adam@example.com", "yearsOfService": 5, "skillLevel": 5, "location": "Perth"},
    {"id": 3, "name": "Brett Lee", "role": "Product Manager", "department": "Product",
     "contact": "brett@example.com", "yearsOfService": 2, "skillLevel": 4, "location": "Melbourne"},
    {"id": 4, "name": "Shane Warne", "role": "QA Engineer", "department": "Engineering",
     "contact": "shane@example.com", "yearsOfService": 1, "skillLevel": 3, "location": "Sydney"},
    {"id": 5, "name": "Ricky Ponting", "role": "DevOps Engineer", "department": "Operations",
     "contact": "ricky@example.com", "yearsOfService": 6, "skillLevel": 5, "location": "Brisbane"},
    {"id": 6, "name": "Michael Clarke", "role": "UI Designer", "department": "Creative",
     "contact": "michael@example.com", "yearsOfService": 2, "skillLevel": 3, "location": "Melbourne"},
    {"id": 7, "name": "Glenn McGrath", "role": "Backend Developer", "department": "Engineering",
     "contact": "glenn@example.com", "yearsOfService": 4, "skillLevel": 5, "location": "Sydney"},
    {"id": 8, "name": "Steve Waugh", "role": "Project Manager", "department": "Product",
     "contact": "steve@example.com", "yearsOfService": 7, "skillLevel": 4, "location": "Perth"},
]

ACCORDION_ITEMS: list[tuple[str, str]] = [
    ("Q1", "ABC...."),
    ("Q2", "BCD...."),
    ("Q3", "CDE...."),
]

COLOR_OPTIONS: list[tuple[str, str]] = [
    ("Red", "red"),
    ("Blue", "blue"),
    ("Green", "green"),
]

SIZE_OPTIONS: list[tuple[str, str]] = [
    ("Small", "sm"),
    ("Medium", "md"),
    ("Large", "lg"),
]
