from setuptools import setup, find_packages

setup(
    name="ai-text-processor",
    version="1.0.0",
    description="Rule-based text cleanup for clipboard entries and notes (dedupe, format, list, grammar, case)",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
        "markdown",
        "beautifulsoup4",
        "markdownify",
        "tabulate",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "aitextprocessor=ai_text_processor.cli:main",
        ],
    },
    python_requires=">=3.9",
)
