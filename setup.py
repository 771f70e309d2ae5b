from setuptools import setup, find_packages

setup(
    name="weather_location_search",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24",
        "tenacity>=8.0",
        "azure-functions>=1.11",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description="Location search autocomplete and OpenWeather proxy functions.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
