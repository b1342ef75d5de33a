from dna_translator.playback import (
    MAX_INTERVAL_MS,
    MIN_INTERVAL_MS,
    PlaybackStep,
    TranslationPlayback,
    clamp_interval,
)


def test_steps_walk_the_orf():
    playback = TranslationPlayback("CCCATGAAATAGCCC")
    assert list(playback.steps()) == [
        PlaybackStep(1, "ATG", "M", "M"),
        PlaybackStep(2, "AAA", "K", "MK"),
    ]


def test_no_start_codon_yields_nothing():
    playback = TranslationPlayback("CCCAAA")
    assert playback.orf is None
    assert list(playback.steps()) == []
    assert playback.play(lambda step: None, sleep=lambda seconds: None) == ""


def test_play_sleeps_between_steps():
    sleeps = []
    seen = []
    playback = TranslationPlayback("ATGAAATAG", interval_ms=300)
    protein = playback.play(seen.append, sleep=sleeps.append)
    assert protein == "MK"
    assert [step.index for step in seen] == [0, 1]
    assert sleeps == [0.3, 0.3]


def test_cancel_stops_playback():
    sleeps = []
    playback = TranslationPlayback("ATGAAAGGGTAG")

    def on_step(step):
        if step.index == 1:
            playback.cancel()

    assert playback.play(on_step, sleep=sleeps.append) == "MK"
    assert len(sleeps) == 1
    assert playback.cancelled
    playback.reset()
    assert not playback.cancelled


def test_interval_is_clamped():
    assert clamp_interval(10) == MIN_INTERVAL_MS
    assert clamp_interval(5000) == MAX_INTERVAL_MS
    assert clamp_interval(450) == 450


def test_reverse_strand_playback():
    playback = TranslationPlayback("CTATTTCAT", strand="-")
    assert [step.amino_acid for step in playback.steps()] == ["M", "K"]
