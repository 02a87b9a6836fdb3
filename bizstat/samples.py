"""Built-in teaching datasets and default calculator inputs."""

from __future__ import annotations

import pandas as pd

# Default inputs of the calculators, as comma-separated text.
CENTRAL_TENDENCY_VALUES = "10, 12, 14, 16, 18, 20, 22, 24"
CENTRAL_TENDENCY_FREQUENCIES = "2, 3, 5, 7, 6, 4, 2, 1"
DISPERSION_VALUES = "10, 15, 20, 25, 30, 35, 40"
DISPERSION_FREQUENCIES = "2, 4, 6, 8, 6, 4, 2"

# Grouped distribution shown with the one-dimensional charts: (class, midpoint, frequency).
CLASS_INTERVALS: tuple[tuple[str, float, int], ...] = (
    ("10-20", 15.0, 5),
    ("20-30", 25.0, 12),
    ("30-40", 35.0, 18),
    ("40-50", 45.0, 15),
    ("50-60", 55.0, 8),
    ("60-70", 65.0, 2),
)

_SAMPLES: dict[str, dict] = {
    "student_performance": {
        "title": "Student Performance Analysis",
        "category": "Academic",
        "description": "Academic performance data with grades across multiple subjects",
        "columns": ["Student", "Math", "Science", "English", "History", "GPA"],
        "rows": [
            ("Alice Johnson", 92, 88, 85, 90, 3.8),
            ("Bob Smith", 78, 82, 76, 80, 3.2),
            ("Carol Wilson", 95, 91, 89, 94, 4.0),
            ("David Brown", 82, 85, 88, 83, 3.4),
            ("Eva Davis", 88, 90, 92, 87, 3.7),
            ("Frank Miller", 75, 78, 80, 77, 3.0),
            ("Grace Lee", 96, 94, 91, 93, 3.9),
            ("Henry Taylor", 84, 87, 83, 85, 3.5),
        ],
    },
    "sales_performance": {
        "title": "Sales Performance Data",
        "category": "Business",
        "description": "Monthly sales data with profit margins and regional performance",
        "columns": ["Month", "Sales", "Profit", "Region", "Employees"],
        "rows": [
            ("January", 45000, 9000, "North", 25),
            ("February", 52000, 11500, "North", 28),
            ("March", 48000, 10200, "South", 26),
            ("April", 61000, 14000, "East", 32),
            ("May", 55000, 12800, "West", 30),
            ("June", 67000, 15500, "North", 35),
            ("July", 59000, 13200, "South", 31),
            ("August", 63000, 14800, "East", 33),
        ],
    },
    "employee_survey": {
        "title": "Employee Survey Results",
        "category": "Survey",
        "description": "Satisfaction ratings and demographic data from employee survey",
        "columns": ["Department", "Satisfaction", "Experience", "Salary", "Age"],
        "rows": [
            ("Engineering", 4.2, 5.5, 75000, 32),
            ("Marketing", 3.8, 3.2, 58000, 28),
            ("Sales", 4.0, 4.1, 52000, 30),
            ("HR", 3.9, 6.2, 61000, 35),
            ("Finance", 4.1, 4.8, 68000, 33),
            ("Operations", 3.7, 3.5, 55000, 29),
            ("IT", 4.3, 4.9, 72000, 31),
            ("Legal", 3.6, 7.1, 85000, 38),
        ],
    },
    "product_quality": {
        "title": "Product Quality Metrics",
        "category": "Quality",
        "description": "Manufacturing quality control data with defect rates and costs",
        "columns": ["Product", "DefectRate", "Cost", "Production", "Rating"],
        "rows": [
            ("Widget A", 2.1, 15.50, 1200, 4.5),
            ("Widget B", 1.8, 22.30, 950, 4.2),
            ("Widget C", 3.2, 18.75, 1100, 3.8),
            ("Widget D", 1.5, 28.90, 850, 4.7),
            ("Widget E", 2.7, 16.20, 1300, 4.1),
            ("Widget F", 2.0, 24.60, 1000, 4.4),
            ("Widget G", 1.9, 19.80, 1150, 4.3),
            ("Widget H", 2.4, 21.40, 1075, 4.0),
        ],
    },
}


def list_samples() -> list[dict[str, str]]:
    """Return name, title, category and description of every sample dataset."""
    return [
        {
            "name": name,
            "title": spec["title"],
            "category": spec["category"],
            "description": spec["description"],
        }
        for name, spec in _SAMPLES.items()
    ]


def load_sample(name: str) -> pd.DataFrame:
    """Return a fresh copy of the named sample dataset.

    Raises:
        KeyError: If ``name`` is not a known sample.
    """
    spec = _SAMPLES.get(name)
    if spec is None:
        raise KeyError(f"Unknown sample '{name}'. Available: {sorted(_SAMPLES)}")
    return pd.DataFrame.from_records(spec["rows"], columns=spec["columns"])


def load_class_intervals() -> pd.DataFrame:
    """Return the sample grouped distribution with ``Class``/``Midpoint``/``Frequency``."""
    return pd.DataFrame.from_records(
        CLASS_INTERVALS, columns=["Class", "Midpoint", "Frequency"]
    )
