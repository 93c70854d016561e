[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookingkit"
version = "0.1.0"
description = "Bus seat allocation, cinema reservations, a lending library, and account, cart, user-storage and strategy components"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "booking",
    "reservation",
    "seats",
    "cinema",
    "library",
    "accounts",
    "shopping-cart",
    "strategy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookingkit-seating = "bookingkit.seating:main"
bookingkit-cinema = "bookingkit.cinema:main"
bookingkit-library = "bookingkit.library:main"
bookingkit-accounts = "bookingkit.accounts:main"
bookingkit-cart = "bookingkit.cart:main"
bookingkit-users = "bookingkit.users:main"
bookingkit-strategies = "bookingkit.strategies:main"

[tool.hatch.build.targets.wheel]
packages = ["bookingkit"]

[tool.hatch.build.targets.sdist]
include = ["bookingkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
