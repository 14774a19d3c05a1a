from setuptools import setup, find_packages

setup(
    name="robohub-inventory",
    version="0.1.0",
    packages=find_packages(include=["robohub_inventory", "robohub_inventory.*"]),
    python_requires=">=3.9",
    install_requires=[
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite",
        "asyncpg",
        "alembic",
        "pydantic>=2.0",
        "pydantic-settings",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "robohub-inventory-migrate=robohub_inventory.main:main",
        ],
    },
)
