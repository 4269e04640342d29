"""Tests for procedural cue sounds."""

import numpy as np

from pongsim.audio import CUE_TONES, SAMPLE_RATE, CuePlayer, sweep_wave


def test_sweep_wave_shape_and_range():
    wave = sweep_wave(0.1, 440, 200, volume=0.6)
    assert wave.dtype == np.int16
    assert len(wave) == int(SAMPLE_RATE * 0.1)
    assert np.abs(wave).max() <= int(0.6 * 32767)


def test_sweep_wave_decays():
    wave = sweep_wave(0.2, 880, 440).astype(np.float64)
    quarter = len(wave) // 4
    assert np.abs(wave[-quarter:]).max() < np.abs(wave[:quarter]).max()


def test_every_cue_has_a_tone():
    assert set(CUE_TONES) == {"wall", "racket", "point"}


def test_disabled_player_is_silent():
    player = CuePlayer(enabled=False)
    assert not player.enabled
    player.play("racket")  # no mixer, no error
    player.play("unknown")
