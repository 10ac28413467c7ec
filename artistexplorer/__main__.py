from artistexplorer.cli import main

main()
