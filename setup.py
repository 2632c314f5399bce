from setuptools import setup, find_packages

setup(
    name='onto2dot',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    package_data={
        'onto2dot': ['templates/*.dot'],
    },
    install_requires=[
        'Click',
        'rdflib',
        'jinja2',
    ],
    extras_require={
        'test': ['pytest', 'Click>=8.2'],
    },
    entry_points='''
        [console_scripts]
        onto2dot=onto2dot.cli:main
    ''',
)
