"""Mr. Reacto: randomized reaction cue trainer."""
