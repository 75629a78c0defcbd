from django.apps import AppConfig


class GnfaConverterConfig(AppConfig):
    name = 'gnfa_converter'
    verbose_name = 'NFA to regular expression converter'
