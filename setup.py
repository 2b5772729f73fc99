from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")

setup(
    name='classroom_types',
    version='0.1.0',
    description='Pydantic models and wire codec for the Google Classroom REST API',
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    package_dir={"": "src"},
    packages=find_packages(where="src"),
)
