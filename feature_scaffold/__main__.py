from feature_scaffold.cli import main

main()
