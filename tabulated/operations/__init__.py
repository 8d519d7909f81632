"""Operations that build new functions out of existing ones."""
