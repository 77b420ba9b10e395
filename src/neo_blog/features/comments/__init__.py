"""Comments on posts and the replies nested under them."""
