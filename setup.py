#!/usr/bin/env python3
"""
Setup script for Image Enhancer
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text()

setup(
    name="image-enhancer",
    version="0.2.0",
    author="Image Enhancer Team",
    description="2x image upscaling with classical sharpening or ONNX super-resolution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'image_enhancer': [
            'config/*.yaml'
        ]
    },
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0",
        "pyyaml>=6.0",
        "Pillow>=9.1",
        "numpy>=1.21",
        "onnxruntime>=1.12",
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'onnx>=1.12',
        ],
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'onnx>=1.12',
            'black>=22.0',
            'flake8>=5.0',
            'mypy>=1.0',
        ]
    },
    entry_points={
        'console_scripts': [
            'image-enhancer=image_enhancer.cli.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
    ],
)
