"""
Setup script for quiz-runtime.

Quiz Runtime is the assessment core of the learning platform's
component library. It covers three flows:

1. Quiz Taking - Live session state for a student answering questions
2. Auto-Grading - Set-equality grading of objective question types
3. Review - Performance reports and teacher correction views
"""

from setuptools import find_packages, setup

setup(
    name="quiz-runtime",
    version="1.0.0",
    description="Quiz session, auto-grading and performance aggregation core",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Right Learning",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # Config & Validation
        "pydantic>=2.4.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="quiz assessment grading education",
)
