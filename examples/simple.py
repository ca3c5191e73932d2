import sys

from chord_player import ChordPlayer, OfflineAudioContext, from_pychord

context = OfflineAudioContext()

# Chord by name
chord = ChordPlayer.build("Abmaj7", context)
sys.stdout.write(" ".join(chord.get_chord_info()) + "\n")  # "G#4 C5 D#5 G5"

# Chord by explicit notes, octaves filled in as the notes ascend
voicing = ChordPlayer.build(["Ab4", "C", "E"], context)
sys.stdout.write(" ".join(voicing.get_chord_info()) + "\n")  # "G#4 C5 E5"

# Common chord symbols via pychord
minor = ChordPlayer.build(from_pychord("Gm7"), context)
minor.set_duration(1.0)
minor.play(lambda: sys.stdout.write("Gm7 finished\n"))
context.run()
