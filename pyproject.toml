[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopmesh"
version = "0.1.0"
description = "A small e-commerce backend: inventory and order services behind a JWT-checking API gateway"
requires-python = ">=3.10"
keywords = ["e-commerce", "inventory", "orders", "api-gateway", "jwt", "flask", "mongodb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "pymongo",
    "pyjwt",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shopmesh-gateway = "shopmesh.gateway:main"
shopmesh-inventory = "shopmesh.inventory_api:main"
shopmesh-orders = "shopmesh.order_api:main"

[tool.hatch.build.targets.wheel]
packages = ["shopmesh"]

[tool.pytest.ini_options]
addopts = "-ra"
