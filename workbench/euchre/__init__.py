"""Cards, packs, players and game flow for four-player euchre."""