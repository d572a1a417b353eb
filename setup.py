from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="sliderbar",
    version="1.0.0",
    author="",
    author_email="",
    description="A two-thumb range slider widget for GTK 4 that snaps to allowed values",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: X11 Applications :: GTK",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: User Interfaces",
    ],
    python_requires=">=3.8",
    install_requires=[
        "PyGObject>=3.42.0",  # For GTK4 support
        "pycairo>=1.20.0",    # For drawing the bar and thumbs
    ],
    package_data={
        'sliderbar': ['style/*.css'],
    },
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'sliderbar=sliderbar.main:main',
        ],
    },
)
