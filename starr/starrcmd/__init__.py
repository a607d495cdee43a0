"""Read custom script events that a Starr application passes in environment variables."""