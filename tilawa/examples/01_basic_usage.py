"""
Basic Usage Example for Tilawa

This example demonstrates the simplest way to use Tilawa:
1. Look up the expected verse text
2. Score a transcript against it
3. Inspect accuracy, Abjad value, rule observations and points
"""

from tilawa import analyze_recitation, level_badge
from tilawa.data import VerseLookup


def main():
    verses = VerseLookup()
    expected = verses.expected_text(1, 1)

    # What a speech recognizer might return for a recitation of 1:1
    transcripts = [
        "بِسمِ اللهِ الرَحمٰنِ الرَحِيمِ",
        "بسم الله الرحمن الرحيم",
        "بسم الله",
    ]

    print(f"Expected (1:1): {expected}\n")
    print("-" * 80)
    for transcript in transcripts:
        analysis = analyze_recitation(expected, transcript)
        print(f"Transcript:  {transcript}")
        print(f"  Accuracy:    {analysis.accuracy}%")
        print(f"  Abjad:       {analysis.abjad_value} "
              f"(expected {analysis.abjad.expected_value}, "
              f"{'match' if analysis.abjad.is_match else 'mismatch'})")
        print(f"  Points:      {analysis.points} "
              f"({analysis.reward.base_points} + {analysis.reward.abjad_bonus} "
              f"+ {analysis.reward.perfection_bonus})")
        if analysis.observations:
            for observation in analysis.observations:
                print(f"  Missed rule: {observation.rule_name} - {observation.description}")
        print("-" * 80)

    badge = level_badge(1507)
    print(f"\n1507 points is level: {badge.icon} {badge.level}")


if __name__ == "__main__":
    main()
