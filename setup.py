from setuptools import find_packages, setup


extras_require = {}

extras_require["test"] = [
    'pytest>=7.4,<9.0',
]

extras_require["all"] = [
    *extras_require["test"],
]


setup(
    name='fakehook',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*', 'demo']),
    license='MIT',
    description='Generate fake test data and POST it to webhook.site for inspection',
    entry_points={
        'console_scripts': [
            'fakehook = fakehook.cli:main',
        ],
    },
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=[
        'Faker>=24.0',
        'requests>=2.31.0,<3.0',
        'pydantic>=2.0,<3.0',
        'python-dotenv>=1.0.0,<2.0',
        'python-dateutil>=2.8.2,<3.0',
    ],
    extras_require=extras_require,
    python_requires=">=3.10"
)
