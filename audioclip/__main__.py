from audioclip.cli import main

main()
