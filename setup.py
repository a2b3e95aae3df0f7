from setuptools import setup

with open('README.md', 'r') as f:
    readme = f.read()


with open('requirements.txt', 'r') as f:
    requirements = f.read().split()


entry_points = {'console_scripts': [
    'lhrdecoder = lhrdecoder.scripts.run_decoder:main',
]}

setup(
    name='lhrdecoder',
    version='0.1.0',
    description='Dependency tree decoding from latent head attachment scores',
    long_description=readme,
    license='LGPL',
    packages=['lhrdecoder', 'lhrdecoder.classifier', 'lhrdecoder.parser',
              'lhrdecoder.commons', 'lhrdecoder.scripts'],
    entry_points=entry_points,
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
)
