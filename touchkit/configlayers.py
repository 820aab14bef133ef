'''
I like my programs to have a JSON config file where I only write down the
things I want to change. So the defaults live in the code as a dict, and the
user's file is laid on top of them: whatever keys the file has win, whatever
it leaves out stays default, and nested dicts are merged instead of being
replaced outright.

If the defaults know about keys the user's file doesn't, you get
needs_rewrite=True back, in case you want to save the file out again so I can
see what's available.
'''
import copy
import json
import os

def recursive_dict_keys(d):
    '''
    I need every key of the dict, including the keys of dicts nested inside
    it, to find out what the user's file is missing. Nested keys are joined
    to their parent with a backslash.

    {'hi': {'ho': 'neighbor'}} -> {'hi', 'hi\\ho'}
    '''
    keys = set(d)
    for (key, value) in d.items():
        if not isinstance(value, dict):
            continue
        keys.update(f'{key}\\{subkey}' for subkey in recursive_dict_keys(value))
    return keys

def recursive_dict_update(target, supply):
    '''
    dict.update, except when both sides have a dict under the same key I
    update the inner dict instead of throwing it away. Otherwise a user who
    writes one nested key would erase all of its siblings. target is modified
    in place.
    '''
    for (key, value) in supply.items():
        existing = target.get(key, None)
        if isinstance(value, dict) and isinstance(existing, dict):
            recursive_dict_update(target=existing, supply=value)
        else:
            target[key] = value

def layer_json(target, supply):
    missing = recursive_dict_keys(target) - recursive_dict_keys(supply)
    recursive_dict_update(target=target, supply=supply)
    return (target, bool(missing))

def load_file(filepath, default_config):
    '''
    Return (config, needs_rewrite). I make a deep copy of default_config
    first, so you can call this as often as you like with the same defaults.
    If there is no file yet, you get the defaults and needs_rewrite=True.
    '''
    config = copy.deepcopy(default_config)

    if not os.path.isfile(filepath):
        return (config, True)

    with open(filepath, 'r', encoding='utf-8') as handle:
        user_config = json.load(handle)

    return layer_json(target=config, supply=user_config)
