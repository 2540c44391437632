# -*- coding: utf-8 -*-


from jinja2 import Environment, PackageLoader, select_autoescape


def _jinja2_env_factory():
    loader = PackageLoader('dftvis', '.')
    autoescape = select_autoescape(['j2', 'cu.j2'])
    return Environment(loader=loader, autoescape=autoescape)


jinja_env = _jinja2_env_factory()
