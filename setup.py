from setuptools import setup

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(
    name='crx-tool',
    version='0.1.0',
    description='Reading, inspecting and packing Chrome extension (crx) files.',
    author='Achim D. Brucker, Michael Herzberg',
    license='GPL 3.0',
    packages=['CrxTool'],
    scripts=['crx-tool.py'],
    install_requires=requirements,
    extras_require={'test': ['pytest>=7']}
)
