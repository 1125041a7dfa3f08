from setuptools import setup


setup(
    name="eod-report",
    version="0.1.0",
    description="End-of-day sales report: validate an order CSV, apply discount rules, aggregate by region and customer",
    packages=["eod_report"],
    python_requires=">=3.9",
    install_requires=[
        "pandas",
        "chardet",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "eod-report=eod_report.cli:main",
        ]
    },
)
