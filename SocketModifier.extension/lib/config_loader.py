# -*- coding: utf-8 -*-
"""Configuration loader for SocketModifier.

Loads rules from a JSON configuration file and applies sensible defaults.
"""
import io
import json
import os


DEFAULT_DEVICE_CATEGORIES = [
    'OST_ElectricalFixtures',
    'OST_ElectricalEquipment',
    'OST_LightingDevices',
    'OST_DataDevices',
    'OST_TelephoneDevices',
    'OST_FireAlarmDeviceTags',
    'OST_CommunicationDevices',
]


def _extension_root_from_lib():
    """Return the extension root directory from the lib location."""
    return os.path.dirname(os.path.dirname(__file__))


def get_default_rules_path():
    """Return the path of the default configuration file."""
    return os.path.join(_extension_root_from_lib(), 'config', 'rules.default.json')


def get_defaults():
    """Return a fresh copy of the default rules."""
    return {
        'device_categories': list(DEFAULT_DEVICE_CATEGORIES),
        'device_param_name': 'WandTyp',
        'wall_material_param_names': [],
        'wall_material_param_contains': 'IfcMaterial',
        'transaction_name': 'Adding Parameter',
    }


def load_rules(path=None):
    """Load rules from a JSON configuration file.

    Args:
        path: Path to the JSON config file. If None, the default rules file
            is used; a missing default file yields the defaults alone.

    Returns:
        Dictionary with every configuration key, defaults applied.
    """
    rules_path = path or get_default_rules_path()
    if path is None and not os.path.exists(rules_path):
        return get_defaults()

    try:
        with io.open(rules_path, 'r', encoding='utf-8') as fp:
            data = json.load(fp)
    except ValueError:
        # BOM written by Windows editors
        with open(rules_path, 'rb') as fb:
            raw = fb.read()
        data = json.loads(raw.decode('utf-8-sig'))

    if data is None:
        data = {}

    for key, val in get_defaults().items():
        if key not in data:
            data[key] = val

    return data
