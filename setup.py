from setuptools import setup, find_packages

setup(
    name="mywx_pusher",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "requests>=2.32.3",
        "schedule>=1.2.2",
        "setuptools>=80.8.0",
    ],
    extras_require={
        "dev": [
            "black>=25.1.0",
            "build>=1.2.2",
            "flake8>=7.2.0",
            "mypy>=1.15.0",
            "pytest>=8.0.0",
            "pytest-cov>=6.1.1",
            "types-requests>=2.32.0.20250515",
            "wheel>=0.40.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mywx_pusher=main:main",
        ],
    },
    python_requires=">=3.9",
    description="Pushes current conditions from a local weather station and air quality sensors to mywx.live",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
    ],
)
