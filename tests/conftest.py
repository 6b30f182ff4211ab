import os
import random

import pytest

from CrxTool.keys import generate_rsa_key_pair, load_key_pair

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture(scope="session")
def key_pair():
    return generate_rsa_key_pair(1024)


@pytest.fixture(scope="session")
def testing_key_pair():
    return load_key_pair(os.path.join(DATA_DIR, "testing_key.pem"))


@pytest.fixture(scope="session")
def testing_public_key():
    with open(os.path.join(DATA_DIR, "testing_key.pub.der"), 'rb') as f:
        return f.read()


@pytest.fixture
def rng():
    return random.Random(0xC24)
