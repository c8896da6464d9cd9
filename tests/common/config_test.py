# -*- coding: utf-8 -*-
"""Test cases for Config modules."""
import os
import shutil
import unittest

from tests.tools import get_template_config
from sudokit.common.config import BoardConfig, Config, GeneratorConfig, load_config
from sudokit.common.constants import Difficulty

TEMP_CONFIG_DIR = os.path.join(os.path.dirname(__file__), "temp_config_dir")


class TestConfig(unittest.TestCase):
    def setUp(self):
        os.makedirs(TEMP_CONFIG_DIR, exist_ok=True)

    def tearDown(self):
        if os.path.exists(TEMP_CONFIG_DIR):
            shutil.rmtree(TEMP_CONFIG_DIR)

    def _write(self, name: str, content: str) -> str:
        path = os.path.join(TEMP_CONFIG_DIR, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_load_template_config(self):
        config = get_template_config()
        self.assertIsInstance(config, Config)
        self.assertIsInstance(config.generator, GeneratorConfig)
        self.assertIsInstance(config.board, BoardConfig)
        self.assertEqual(config.generator.difficulty, "easy")
        self.assertEqual(config.generator.seed, 1234)
        # keys missing from the file keep their defaults
        self.assertEqual(config.generator.removal_targets["expert"], 70)
        config.check_and_update()
        self.assertEqual(config.log_level, "DEBUG")

    def test_defaults(self):
        config = Config().check_and_update()
        self.assertEqual(config.generator.difficulty, "medium")
        self.assertEqual(config.generator.max_attempts, 8)
        self.assertIsNone(config.generator.seed)
        self.assertEqual(
            config.generator.removal_targets, {"easy": 45, "medium": 55, "hard": 62, "expert": 70}
        )
        self.assertTrue(config.board.auto_clean_notes)
        self.assertTrue(config.board.conflict_highlight)
        self.assertEqual(config.board.max_history, 200)

    def test_partial_removal_targets_are_merged(self):
        path = self._write("partial.yaml", "generator:\n  removal_targets:\n    easy: 30\n")
        config = load_config(path)
        self.assertEqual(config.generator.removal_targets["easy"], 30)
        self.assertEqual(config.generator.removal_targets["hard"], 62)
        self.assertEqual(config.generator.removal_target(Difficulty.EASY), 30)

    def test_removal_target_keys_are_canonicalized(self):
        config = Config(
            generator=GeneratorConfig(removal_targets={"HARD": 12, "normal": 10, " Evil ": 64})
        ).check_and_update()
        self.assertEqual(config.generator.removal_targets, {"hard": 12, "medium": 10, "expert": 64})
        self.assertEqual(config.generator.removal_target(Difficulty.HARD), 12)
        self.assertEqual(config.generator.removal_target(Difficulty.MEDIUM), 10)

    def test_removal_target_keys_from_file_override_defaults(self):
        path = self._write("upper.yaml", "generator:\n  removal_targets:\n    HARD: 12\n")
        config = load_config(path).check_and_update()
        self.assertEqual(config.generator.removal_target(Difficulty.HARD), 12)
        self.assertEqual(config.generator.removal_target(Difficulty.EASY), 45)

    def test_unknown_difficulty_falls_back(self):
        config = Config(generator=GeneratorConfig(difficulty="impossible")).check_and_update()
        self.assertEqual(config.generator.difficulty, "medium")
        config = Config(generator=GeneratorConfig(difficulty="Expert")).check_and_update()
        self.assertEqual(config.generator.difficulty, "expert")

    def test_invalid_values_are_rejected(self):
        with self.assertRaises(ValueError):
            Config(generator=GeneratorConfig(max_attempts=0)).check_and_update()
        with self.assertRaises(ValueError):
            Config(generator=GeneratorConfig(removal_targets={"easy": 82})).check_and_update()
        with self.assertRaises(ValueError):
            Config(generator=GeneratorConfig(removal_targets={"nightmare": 75})).check_and_update()
        with self.assertRaises(ValueError):
            Config(board=BoardConfig(max_history=-1)).check_and_update()
        with self.assertRaises(ValueError):
            Config(log_level="chatty").check_and_update()

    def test_invalid_file_raises_value_error(self):
        path = self._write("bad.yaml", "generator:\n  max_attempts: lots\n")
        with self.assertRaises(ValueError):
            load_config(path)
        path = self._write("unknown.yaml", "solver:\n  depth: 3\n")
        with self.assertRaises(ValueError):
            load_config(path)
        path = self._write("broken.yaml", "generator: [difficulty: easy\n")
        with self.assertRaises(ValueError):
            load_config(path)
        with self.assertRaises(ValueError):
            load_config(os.path.join(TEMP_CONFIG_DIR, "missing.yaml"))

    def test_all_examples_are_valid(self):
        example_dir = os.path.join(os.path.dirname(__file__), "..", "..", "examples")
        for example_name in os.listdir(example_dir):
            for filename in os.listdir(os.path.join(example_dir, example_name)):
                if filename.endswith(".yaml"):
                    config_path = os.path.join(example_dir, example_name, filename)
                    with self.subTest(config=filename):
                        config = load_config(config_path)
                        config.check_and_update()
