import setuptools

long_description = """#MyConstituency"""

with open("requirements.txt", "r") as req_file:
    requirements = req_file.readlines()
setuptools.setup(
    name="myconstituency",
    version="0.0.1",
    author="MyConstituency",
    author_email="hello@myconstituency.ca",
    description="Representatives and legislative votes for Canadian postal codes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://myconstituency.ca",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"myconstituency": ["data/*.yaml"]},
    classifiers=[],
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'mc=myconstituency.cli:main',
        ],
    }
)
