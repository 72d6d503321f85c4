# cli - Click CLI (azs)
