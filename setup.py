from setuptools import setup, find_packages

setup(
    name='letterman',
    version='1.0.0',
    description='Word morph search over an annotated dictionary',
    packages=find_packages(include=[
        'letterman_api', 'letterman_api.*',
        'letterman_core', 'letterman_core.*',
        'dictionary_source_plugin_text', 'dictionary_source_plugin_text.*',
        'dictionary_source_plugin_xml', 'dictionary_source_plugin_xml.*',
    ]),
    install_requires=[
        'lxml>=6.0.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'letterman = letterman_core.morph_platform.cli:main',
        ],
        'letterman.dictionary_source': [
            'text = dictionary_source_plugin_text.plugin:TextDictionarySourcePlugin',
            'xml = dictionary_source_plugin_xml.plugin:XmlDictionarySourcePlugin',
        ],
    },
    python_requires='>=3.10',
)
