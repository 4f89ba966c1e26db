from setuptools import setup, find_packages

setup(
    name='zoomkit',
    version='1.0.0',
    packages=find_packages(include=['zoomkit', 'zoomkit.*']),
    include_package_data=True,
    python_requires='>=3.11',
    install_requires=[
        'colored==2.2.3',
        'halo==0.0.31',
        'numpy>=1.26.2',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.4'],
    },
    entry_points='''
        [console_scripts]
        zoomkit=zoomkit.__main__:main
    ''',
    license='MIT',
    keywords='video zoom camera interpolation easing',
    description='Camera zoom interpolation engine for screen-recording timelines',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
