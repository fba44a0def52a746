from setuptools import setup, find_packages

# -------------------------------------------------------------------------------------------------
setup(
    name='gltf_formats',
    version='0.1',
    packages=find_packages(include=['gltf_formats', 'gltf_formats.*']),
    install_requires=[
        'colorama',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
