[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Textbook cryptography: AES-128, DES, ElGamal, classical ciphers, entropy and number theory helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "aes",
    "des",
    "elgamal",
    "caesar",
    "transposition",
    "vernam",
    "entropy",
    "number-theory",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptolab = "cryptolab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
addopts = "-ra"
