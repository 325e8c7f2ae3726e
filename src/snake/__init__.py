"""Snake on a wrap-around grid: game state, clock, input and pygame front end."""
