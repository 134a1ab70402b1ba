from chess_phone_numbers.phone_numbers import main

raise SystemExit(main())
