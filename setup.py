import logging
import re
from pathlib import Path
from typing import List

from setuptools import setup, find_packages

logger = logging.getLogger(__name__)
console_handler = logging.StreamHandler()

logger.addHandler(console_handler)
logger.setLevel(logging.DEBUG)

TEST_REQUIRES = ["pytest>=7.4", "httpx>=0.25"]


def read_requirements(path: str = "./requirements.txt") -> List[str]:
    """Requirement lines without comments or blanks."""
    with open(path) as f:
        lines = [line.strip() for line in f.read().splitlines()]
    install_requires = [line for line in lines if line and not line.startswith("#")]
    logger.debug(f"install_requires: {install_requires}")
    return install_requires


def get_version():
    file = Path("./hijri_calendar/__init__.py")
    return re.search(
        r'^__version__ *= *[\'"]([^\'"]*)[\'"]', file.read_text(encoding="utf-8"), re.M
    )[1]


setup(
    name="hijri_calendar",
    version=get_version(),
    description="Dual Gregorian/Hijri calendar service with observances, countdowns and reminders",
    zip_safe=False,
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    install_requires=read_requirements(),
    extras_require={"test": TEST_REQUIRES},
    python_requires=">=3.9",
    entry_points={"console_scripts": ["hijri-calendar=hijri_calendar.__main__:main"]},
)
