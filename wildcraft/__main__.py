from wildcraft.main import main

main()
