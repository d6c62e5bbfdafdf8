"""Sample game: a player, a wandering cat, their scripts, the title and main scenes, and texture loading."""