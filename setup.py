from pathlib import Path
from setuptools import setup, find_packages

# Read long description from README
root = Path(__file__).parent
long_description = (root / "README.md").read_text(encoding="utf-8")

setup(
    name="makedeck",
    version="0.1.0",
    description="JSON slide descriptor → PowerPoint deck",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Bilal",
    packages=find_packages(exclude=("tests*", "examples*")),
    python_requires=">=3.9",
    install_requires=[
        "python-pptx>=1.0.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0.1",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "makedeck = makedeck.__main__:cli_entry",
        ]
    },
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: MIT License",
    ],
)
