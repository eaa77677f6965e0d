[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galois_aead"
version = "0.1.0"
description = "AES-GCM authenticated encryption with configurable nonce and tag sizes"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["aes", "gcm", "aead", "ghash", "encryption", "authenticated-encryption"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["galois_aead"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
