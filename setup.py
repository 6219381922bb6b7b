from setuptools import setup, find_packages

setup(
    name="goodbuddi",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.104.1",
        "uvicorn[standard]>=0.24.0",
        "sqlalchemy>=2.0.23",
        "apscheduler>=3.10.4,<4",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.3",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "postgres": ["psycopg[binary]>=3.1"],
        "test": ["pytest>=7.4", "httpx>=0.25"],
    },
    entry_points={
        "console_scripts": ["goodbuddi=goodbuddi.start:main"],
    },
    python_requires=">=3.10",
)
